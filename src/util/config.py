from __future__ import annotations
from pathlib import Path
from typing import Any, Mapping, Sequence, TypedDict, Union

from .constants import ConfigKey
from .custom_types import ChrLabel, WindowLen


class Config(TypedDict, total=False):
    NumChr: int
    CooDis: int
    NumAutosomes: int
    Allosomes: Sequence[ChrLabel]
    DirFas: Union[str, Path]
    w_min: WindowLen
    w_max: WindowLen


class ConfigRead:
    """
    Typed accessors over an externally supplied configuration mapping.

    Each operation reads only the keys it needs. A missing key raises KeyError.
    """

    @classmethod
    def int_of(cls, config: Mapping[str, Any], key: str) -> int:
        value = config[key]
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"Config {key} must be an integer, got {value!r}")

        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Config {key} must be an integer, got {value!r}") from e

    @classmethod
    def num_chr(cls, config: Mapping[str, Any]) -> int:
        return cls.int_of(config, ConfigKey.NUM_CHR)

    @classmethod
    def coo_dis(cls, config: Mapping[str, Any]) -> int:
        return cls.int_of(config, ConfigKey.COO_DIS)

    @classmethod
    def num_autosomes(cls, config: Mapping[str, Any]) -> int:
        return cls.int_of(config, ConfigKey.NUM_AUTOSOMES)

    @classmethod
    def allosomes(cls, config: Mapping[str, Any]) -> list[ChrLabel]:
        allosomes = config[ConfigKey.ALLOSOMES]
        if isinstance(allosomes, str):
            return [allosomes]

        return [str(a) for a in allosomes]

    @classmethod
    def dir_fas(cls, config: Mapping[str, Any]) -> Path:
        return Path(config[ConfigKey.DIR_FAS])

    @classmethod
    def window_range(cls, config: Mapping[str, Any]) -> tuple[WindowLen, WindowLen]:
        return cls.int_of(config, ConfigKey.W_MIN), cls.int_of(config, ConfigKey.W_MAX)
