from __future__ import annotations
import itertools
import logging
from pathlib import Path
from typing import Iterable

from Bio.SeqIO.FastaIO import SimpleFastaParser

from .constants import CHR_PREFIX, FASTA_EXT, FASTA_HEADER, ONE_INDEX_START
from .custom_types import ChrLabel, ChrmSeqs


class FastaReader:
    @classmethod
    def read(cls, path: Path | str) -> ChrmSeqs:
        """
        Read all sequences of a multi-FASTA file.

        The file is decoded as latin-1, so any byte is accepted. Lines before
        the first header are ignored. Sequence lines of a record
        are concatenated and lowercased. Records with an empty sequence are
        not returned.

        Raises:
            OSError: If the file can not be opened.
        """
        with open(path, encoding="latin-1") as f:
            return cls.parse(f)

    @classmethod
    def parse(cls, lines: Iterable[str]) -> ChrmSeqs:
        from_first_header = itertools.dropwhile(
            lambda line: not line.startswith(FASTA_HEADER), lines
        )
        seqs = [seq.lower() for _, seq in SimpleFastaParser(from_first_header)]
        return [s for s in seqs if s]


class ChrmSeqReader:
    """
    Reads sequences of all chromosomes from per-chromosome FASTA files
    """

    @classmethod
    def file_names(cls, num_autosomes: int, allosomes: Iterable[ChrLabel]) -> list[str]:
        """
        Returns:
            chr1.fa .. chrN.fa followed by chr{label}.fa for each allosome
        """
        labels = [
            str(i) for i in range(ONE_INDEX_START, num_autosomes + ONE_INDEX_START)
        ] + list(allosomes)
        return [f"{CHR_PREFIX}{label}{FASTA_EXT}" for label in labels]

    @classmethod
    def read(
        cls, dir_fas: Path | str, num_autosomes: int, allosomes: Iterable[ChrLabel]
    ) -> list[ChrmSeqs]:
        """
        Read sequences of autosomes, then allosomes in the given order.

        A file that can not be opened gives an empty list for its chromosome.
        """
        return [
            cls._read_one(Path(dir_fas) / name)
            for name in cls.file_names(num_autosomes, allosomes)
        ]

    @classmethod
    def _read_one(cls, path: Path) -> ChrmSeqs:
        try:
            seqs = FastaReader.read(path)
        except OSError as e:
            logging.warning(f"Could not open file {path}: {e.strerror}")
            return []

        logging.info(f"Read {len(seqs)} sequences from {path}")
        return seqs
