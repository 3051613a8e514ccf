from __future__ import annotations
import logging
from typing import Iterable

from .constants import COMPLEMENT
from .custom_types import DNABase, DNASeq

logging.basicConfig(level=logging.INFO)

_COMPLEMENT_TABLE = str.maketrans(COMPLEMENT)


def complement(base: DNABase) -> DNABase:
    """Complement of a base. Characters outside acgtACGT map to themselves."""
    return COMPLEMENT.get(base, base)


def rev_comp(seq: DNASeq | Iterable[DNASeq]) -> DNASeq | list[DNASeq]:
    if isinstance(seq, DNASeq):
        return seq.translate(_COMPLEMENT_TABLE)[::-1]
    else:
        return list(map(lambda s: rev_comp(s), seq))


def rev_comp_prefix(seq: DNASeq, length: int) -> DNASeq:
    """
    Reverse complement of the first `length` bases of a sequence.

    Bases beyond `length` are dropped, so the result has exactly
    min(length, len(seq)) characters.
    """
    return rev_comp(seq[: max(length, 0)])
