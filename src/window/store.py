from __future__ import annotations
import logging
from typing import Callable, Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from util.constants import FREQ, FULL_RECORD_COLS, INDEX, METHYL, SEQ
from util.custom_types import Bucket, DNASeq, FullBucket, RawBucket, WindowLen
from util.errors import SchemaError


class WindowCalc:
    @classmethod
    def seq_len(cls, w: WindowLen) -> int:
        """
        Number of meaningful bases stored for window length w: the central
        site, w flanking bases on each side and two boundary bases.
        """
        return 2 * w + 2

    @classmethod
    def pos(cls, w: WindowLen) -> int:
        """Position of window length w in a window store"""
        return w - 1


class BucketKind:
    """
    Access to the sequence field of a bucket. Subclasses carry the other
    fields of their representation along with the sequences.
    """

    @classmethod
    def has_seqs(cls, bucket: Bucket) -> bool:
        raise NotImplementedError("Subclass responsibility")

    @classmethod
    def seqs(cls, bucket: Bucket) -> list[DNASeq]:
        raise NotImplementedError("Subclass responsibility")

    @classmethod
    def with_seqs(cls, bucket: Bucket, seqs: list[DNASeq]) -> Bucket:
        raise NotImplementedError("Subclass responsibility")

    @classmethod
    def keep(cls, bucket: Bucket, rows: np.ndarray) -> Bucket:
        """Keep rows at positions `rows` in their original order"""
        raise NotImplementedError("Subclass responsibility")


class FullKind(BucketKind):
    @classmethod
    def has_seqs(cls, bucket: FullBucket) -> bool:
        return SEQ in bucket.columns

    @classmethod
    def seqs(cls, bucket: FullBucket) -> list[DNASeq]:
        return bucket[SEQ].tolist()

    @classmethod
    def with_seqs(cls, bucket: FullBucket, seqs: list[DNASeq]) -> FullBucket:
        df = bucket.copy()
        df[SEQ] = pd.Series(seqs, index=df.index, dtype=object)
        return df

    @classmethod
    def keep(cls, bucket: FullBucket, rows: np.ndarray) -> FullBucket:
        return bucket.iloc[rows].reset_index(drop=True)


class RawKind(BucketKind):
    @classmethod
    def has_seqs(cls, bucket: RawBucket) -> bool:
        return True

    @classmethod
    def seqs(cls, bucket: RawBucket) -> list[DNASeq]:
        return list(bucket)

    @classmethod
    def with_seqs(cls, bucket: RawBucket, seqs: list[DNASeq]) -> RawBucket:
        return list(seqs)

    @classmethod
    def keep(cls, bucket: RawBucket, rows: np.ndarray) -> RawBucket:
        return [bucket[i] for i in rows]


class WindowStore:
    @classmethod
    def bucket_at(cls, store: Sequence[Optional[Bucket]], w: WindowLen) -> Optional[Bucket]:
        """Bucket of window length w. None if absent or out of bounds."""
        if w < 1 or w > len(store):
            return None

        return store[WindowCalc.pos(w)]

    @classmethod
    def map_range(
        cls,
        store: Sequence[Optional[Bucket]],
        w_min: WindowLen,
        w_max: WindowLen,
        kind: type[BucketKind],
        fn: Callable[[Bucket, WindowLen], Bucket],
    ) -> list[Optional[Bucket]]:
        """
        Apply `fn` to each present bucket with window length in [w_min, w_max].

        Absent buckets, buckets outside the range and buckets without sequence
        field are carried over unchanged. The input store is not modified.
        """
        result = list(store)
        for w in range(max(w_min, 1), min(w_max, len(store)) + 1):
            bucket = cls.bucket_at(store, w)
            if bucket is None:
                continue

            if not kind.has_seqs(bucket):
                logging.debug(f"Window {w} has no '{SEQ}' field. Skipped.")
                continue

            result[WindowCalc.pos(w)] = fn(bucket, w)

        return result


class WindowRecord:
    """Builds Full Window Records"""

    @classmethod
    def full(
        cls,
        seq: Iterable[DNASeq],
        methyl: Iterable[float],
        freq: Iterable[int],
        index: Iterable[int],
    ) -> FullBucket:
        """
        Raises:
            SchemaError: If the four fields do not have equal length
        """
        cols = dict(zip(FULL_RECORD_COLS, map(list, (seq, methyl, freq, index))))
        lens = {name: len(vals) for name, vals in cols.items()}
        if len(set(lens.values())) > 1:
            raise SchemaError(
                SEQ, f"Fields of a window record differ in length: {lens}"
            )

        return pd.DataFrame(
            {
                SEQ: pd.Series(cols[SEQ], dtype=object),
                METHYL: pd.Series(cols[METHYL], dtype=float),
                FREQ: pd.Series(cols[FREQ], dtype=np.int64),
                INDEX: pd.Series(cols[INDEX], dtype=np.int64),
            }
        )
