from pathlib import Path

import pytest

from util.config import ConfigRead


class TestConfigRead:
    def test_window_range(self):
        assert ConfigRead.window_range({"w_min": 2, "w_max": "5"}) == (2, 5)

    def test_missing_key(self):
        with pytest.raises(KeyError):
            ConfigRead.num_chr({"CooDis": 1})

    def test_not_an_integer(self):
        with pytest.raises(ValueError, match="CooDis"):
            ConfigRead.coo_dis({"CooDis": "one"})

    def test_allosomes(self):
        assert ConfigRead.allosomes({"Allosomes": ("X", "Y")}) == ["X", "Y"]
        assert ConfigRead.allosomes({"Allosomes": "X"}) == ["X"]

    def test_dir_fas(self):
        assert ConfigRead.dir_fas({"DirFas": "data/fasta"}) == Path("data/fasta")

    def test_fractional_float(self):
        with pytest.raises(ValueError, match="w_max"):
            ConfigRead.window_range({"w_min": 1, "w_max": 2.7})

    def test_integral_float(self):
        assert ConfigRead.window_range({"w_min": 1.0, "w_max": 3.0}) == (1, 3)
