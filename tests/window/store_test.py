import pytest
import numpy as np

from util.constants import FREQ, FULL_RECORD_COLS, INDEX, METHYL, SEQ
from util.errors import SchemaError
from window.store import FullKind, RawKind, WindowCalc, WindowRecord, WindowStore


class TestWindowCalc:
    def test_seq_len(self):
        assert WindowCalc.seq_len(5) == 12
        assert WindowCalc.seq_len(6) == 14

    def test_pos(self):
        assert WindowCalc.pos(1) == 0


class TestWindowStore:
    def test_bucket_at(self, raw_store):
        assert WindowStore.bucket_at(raw_store, 1) == ["acgt"]
        assert WindowStore.bucket_at(raw_store, 0) is None
        assert WindowStore.bucket_at(raw_store, 4) is None

    def test_map_range(self, raw_store):
        res = WindowStore.map_range(raw_store, 2, 10, RawKind, lambda b, w: [str(w)])
        assert res == [["acgt"], ["2"], ["3"]]
        assert raw_store[1] == ["nnnn", "nacg", "acgn"]

    def test_map_range_empty_range(self, raw_store):
        res = WindowStore.map_range(raw_store, 3, 2, RawKind, lambda b, w: [])
        assert res == raw_store
        assert res is not raw_store

    def test_map_range_skips_absent(self, full_store):
        res = WindowStore.map_range(full_store, 1, 4, FullKind, lambda b, w: b.head(1))
        assert res[0] is None
        assert res[3] is None
        assert len(res[1]) == 1
        assert len(res[2]) == 1

    def test_map_range_skips_without_seq(self, full_store):
        store = [full_store[1].drop(columns=SEQ)]
        res = WindowStore.map_range(store, 1, 1, FullKind, lambda b, w: b.head(0))
        assert res[0] is store[0]


class TestWindowRecord:
    def test_full(self):
        df = WindowRecord.full(["ac", "gt"], [0.5, 1.0], [1, 2], [7, 8])
        assert df.columns.tolist() == list(FULL_RECORD_COLS)
        assert df[SEQ].tolist() == ["ac", "gt"]
        assert df[METHYL].tolist() == [0.5, 1.0]
        assert df[FREQ].tolist() == [1, 2]
        assert df[INDEX].tolist() == [7, 8]

    def test_full_unequal_lengths(self):
        with pytest.raises(SchemaError):
            WindowRecord.full(["ac", "gt"], [0.5], [1, 2], [7, 8])

    def test_full_empty(self):
        df = WindowRecord.full([], [], [], [])
        assert df.columns.tolist() == list(FULL_RECORD_COLS)
        assert len(df) == 0


class TestBucketKind:
    def test_full_keep(self, full_store):
        df = FullKind.keep(full_store[1], np.array([0, 2]))
        assert df[INDEX].tolist() == [11, 13]
        assert df.index.tolist() == [0, 1]

    def test_raw_keep(self):
        assert RawKind.keep(["a", "b", "c"], np.array([2])) == ["c"]


class TestWindowStoreRange:
    def test_map_range_far_beyond_store(self, raw_store):
        calls = []

        def _fn(bucket, w):
            calls.append(w)
            return bucket

        res = WindowStore.map_range(raw_store, -5, 10**9, RawKind, _fn)
        assert calls == [1, 2, 3]
        assert res == raw_store
