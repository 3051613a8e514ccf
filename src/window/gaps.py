from __future__ import annotations
import logging
from typing import Optional, Sequence

import numpy as np

from util.constants import GAP
from util.custom_types import Bucket, DNASeq, WindowLen, WindowStore as Store
from .store import BucketKind, FullKind, RawKind, WindowStore


def has_gap(seq: Optional[DNASeq]) -> bool:
    """Missing sequences count as gapped"""
    if not isinstance(seq, str):
        return True

    return GAP in seq.lower()


def _del_gaps_bucket(kind: type[BucketKind]):
    def _apply(bucket: Bucket, w: WindowLen) -> Bucket:
        seqs = kind.seqs(bucket)
        rows = np.flatnonzero([not has_gap(s) for s in seqs])
        logging.debug(f"Window {w}: {len(seqs) - len(rows)} of {len(seqs)} dropped")
        return kind.keep(bucket, rows)

    return _apply


def filter_gaps(
    store: Sequence[Optional[Bucket]],
    w_min: WindowLen,
    w_max: WindowLen,
    kind: type[BucketKind],
) -> Store:
    """
    Remove rows whose sequence contains an ambiguity marker from windows
    w_min to w_max.

    A window where every row is removed becomes an empty bucket, not None.
    """
    return WindowStore.map_range(store, w_min, w_max, kind, _del_gaps_bucket(kind))


def filter_gaps_full(
    store: Sequence[Optional[Bucket]], w_min: WindowLen, w_max: WindowLen
) -> Store:
    return filter_gaps(store, w_min, w_max, FullKind)


def filter_gaps_raw(
    store: Sequence[Optional[Bucket]], w_min: WindowLen, w_max: WindowLen
) -> Store:
    return filter_gaps(store, w_min, w_max, RawKind)
