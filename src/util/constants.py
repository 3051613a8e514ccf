COL_COO = "ColCoo"

SEQ = "Seq"
METHYL = "Methyl"
FREQ = "Freq"
INDEX = "Index"

FULL_RECORD_COLS = (SEQ, METHYL, FREQ, INDEX)

# Ambiguity marker, matched case-insensitively
GAP = "n"

COMPLEMENT = {
    "a": "t",
    "c": "g",
    "g": "c",
    "t": "a",
    "A": "T",
    "C": "G",
    "G": "C",
    "T": "A",
}

FASTA_HEADER = ">"
FASTA_EXT = ".fa"
CHR_PREFIX = "chr"

ONE_INDEX_START = 1


class ConfigKey:
    NUM_CHR = "NumChr"
    COO_DIS = "CooDis"
    NUM_AUTOSOMES = "NumAutosomes"
    ALLOSOMES = "Allosomes"
    DIR_FAS = "DirFas"
    W_MIN = "w_min"
    W_MAX = "w_max"
