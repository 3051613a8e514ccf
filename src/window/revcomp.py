from __future__ import annotations
from typing import Optional, Sequence

from util.custom_types import Bucket, WindowLen, WindowStore as Store
from util.util import rev_comp_prefix
from .store import BucketKind, FullKind, RawKind, WindowCalc, WindowStore


def _rev_comp_bucket(kind: type[BucketKind]):
    def _apply(bucket: Bucket, w: WindowLen) -> Bucket:
        seq_len = WindowCalc.seq_len(w)
        return kind.with_seqs(
            bucket,
            [
                rev_comp_prefix(s, seq_len) if isinstance(s, str) else s
                for s in kind.seqs(bucket)
            ],
        )

    return _apply


def reverse_complement(
    store: Sequence[Optional[Bucket]],
    w_min: WindowLen,
    w_max: WindowLen,
    kind: type[BucketKind],
) -> Store:
    """
    Reverse complement the sequences of windows w_min to w_max.

    Only the first 2w + 2 bases of a sequence in window w are kept.
    """
    return WindowStore.map_range(store, w_min, w_max, kind, _rev_comp_bucket(kind))


def reverse_complement_full(
    store: Sequence[Optional[Bucket]], w_min: WindowLen, w_max: WindowLen
) -> Store:
    return reverse_complement(store, w_min, w_max, FullKind)


def reverse_complement_raw(
    store: Sequence[Optional[Bucket]], w_min: WindowLen, w_max: WindowLen
) -> Store:
    return reverse_complement(store, w_min, w_max, RawKind)
