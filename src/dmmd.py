"""
Operations consumed by the orchestration layer. Each takes the configuration
mapping and the data to transform, and returns new data.
"""
from __future__ import annotations
from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from chromosome.coordinates import CooShifter, CoordinateTable
from util.config import ConfigRead
from util.custom_types import Bucket, ChrmSeqs, WindowStore
from util.reader import ChrmSeqReader
from window import gaps, revcomp


def shift_coordinates(
    config: Mapping[str, Any], tables: Sequence[CoordinateTable]
) -> list[pd.DataFrame]:
    return CooShifter.shift(
        tables, ConfigRead.num_chr(config), ConfigRead.coo_dis(config)
    )


def read_chromosome_sequences(config: Mapping[str, Any]) -> list[ChrmSeqs]:
    return ChrmSeqReader.read(
        ConfigRead.dir_fas(config),
        ConfigRead.num_autosomes(config),
        ConfigRead.allosomes(config),
    )


def reverse_complement_full(
    config: Mapping[str, Any], store: Sequence[Optional[Bucket]]
) -> WindowStore:
    return revcomp.reverse_complement_full(store, *ConfigRead.window_range(config))


def reverse_complement_raw(
    config: Mapping[str, Any], store: Sequence[Optional[Bucket]]
) -> WindowStore:
    return revcomp.reverse_complement_raw(store, *ConfigRead.window_range(config))


def filter_gaps_full(
    config: Mapping[str, Any], store: Sequence[Optional[Bucket]]
) -> WindowStore:
    return gaps.filter_gaps_full(store, *ConfigRead.window_range(config))


def filter_gaps_raw(
    config: Mapping[str, Any], store: Sequence[Optional[Bucket]]
) -> WindowStore:
    return gaps.filter_gaps_raw(store, *ConfigRead.window_range(config))
