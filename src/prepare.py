import argparse
import logging

from dmmd import read_chromosome_sequences
from util.config import Config
from util.reader import ChrmSeqReader


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Read per-chromosome FASTA files and report their sequences"
    )
    parser.add_argument("--dir", required=True, help="Directory of chr*.fa files")
    parser.add_argument("--autosomes", type=int, default=22)
    parser.add_argument("--allosomes", nargs="*", default=["X", "Y"])

    args = parser.parse_args(argv)
    if args.autosomes < 0:
        parser.error("--autosomes must not be negative")

    config: Config = {
        "DirFas": args.dir,
        "NumAutosomes": args.autosomes,
        "Allosomes": args.allosomes,
    }
    seq_chr = read_chromosome_sequences(config)

    names = ChrmSeqReader.file_names(args.autosomes, args.allosomes)
    for name, seqs in zip(names, seq_chr):
        logging.info(
            f"{name}: {len(seqs)} sequences, {sum(map(len, seqs))} bp in total"
        )

    return seq_chr


if __name__ == "__main__":
    main()
