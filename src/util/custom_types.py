from typing import Optional, Union

import pandas as pd

DNASeq = str
DNABase = str

WindowLen = int

ChrLabel = str

# Sequences of one chromosome, in FASTA entry order
ChrmSeqs = list[DNASeq]

# Parallel Seq, Methyl, Freq, Index columns
FullBucket = pd.DataFrame
RawBucket = list[DNASeq]
Bucket = Union[FullBucket, RawBucket]

# Position w - 1 holds the bucket of window length w
WindowStore = list[Optional[Bucket]]
