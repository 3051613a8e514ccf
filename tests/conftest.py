import pytest
import pandas as pd

from util.constants import COL_COO
from window.store import WindowRecord


@pytest.fixture
def coo_tables():
    return [
        pd.DataFrame({COL_COO: [1, 5, 10], "Methyl": [0.1, 0.5, 0.9]}),
        pd.DataFrame({COL_COO: [2, 7, 20], "Methyl": [0.2, 0.3, 0.4]}),
        pd.DataFrame({COL_COO: [4], "Methyl": [1.0]}),
    ]


@pytest.fixture
def full_store():
    return [
        None,
        WindowRecord.full(
            ["acgtacgtacgtac", "aaccnnggtt", "ttgcaaggccttaa"],
            [0.25, 0.5, 0.75],
            [3, 0, 7],
            [11, 12, 13],
        ),
        WindowRecord.full(
            ["NNacgtacgt", "acgNtacgtacg"], [0.1, 0.9], [1, 2], [21, 22]
        ),
        None,
    ]


@pytest.fixture
def raw_store():
    return [
        ["acgt"],
        ["nnnn", "nacg", "acgn"],
        ["acgtacgtacgt", "aaaccgtttagc", "ACGtaNNcg"],
    ]


@pytest.fixture
def fasta_dir(tmp_path):
    (tmp_path / "chr1.fa").write_text(">seq1\nACGT\nacgg\n>seq2\nTTNN\n")
    (tmp_path / "chr2.fa").write_text(">only\nGGCC\n")
    (tmp_path / "chrX.fa").write_text(">x1\n\n>x2\nAtTa\nC\n")
    return tmp_path
