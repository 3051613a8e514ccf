from __future__ import annotations
import logging
from typing import Any, Mapping, Sequence, Union

import pandas as pd

from util.constants import COL_COO, ONE_INDEX_START
from util.errors import ArityError, SchemaError

CoordinateTable = Union[pd.DataFrame, Mapping[str, Any]]


class CooShifter:
    """Displaces coordinates of chromosome tables by a constant offset"""

    @classmethod
    def shift(
        cls, tables: Sequence[CoordinateTable], num_chr: int, delta: int
    ) -> list[pd.DataFrame]:
        """
        Add `delta` to the ColCoo column of the first `num_chr` tables.

        Args:
            tables: One table per chromosome. Columns other than ColCoo are
                passed through.
            num_chr: Number of tables to process and return
            delta: Signed offset

        Returns:
            A list of `num_chr` new dataframes. Input tables are not modified.

        Raises:
            ArityError: If `num_chr` is greater than number of tables
            SchemaError: If a processed table has no numeric ColCoo column
        """
        if num_chr > len(tables):
            raise ArityError(
                f"NumChr ({num_chr}) is greater than number of "
                f"coordinate tables ({len(tables)})"
            )
        if num_chr < 0:
            raise ArityError(f"NumChr must not be negative, got {num_chr}")

        shifted = [
            cls._shift_table(tables[i], i + ONE_INDEX_START, delta)
            for i in range(num_chr)
        ]
        logging.info(f"Coordinates of {num_chr} chromosomes shifted by {delta}")
        return shifted

    @classmethod
    def _shift_table(
        cls, table: CoordinateTable, pos: int, delta: int
    ) -> pd.DataFrame:
        df = table.copy() if isinstance(table, pd.DataFrame) else pd.DataFrame(table)

        if COL_COO not in df.columns:
            raise SchemaError(COL_COO, f"Table {pos} has no '{COL_COO}' column")
        if not pd.api.types.is_numeric_dtype(df[COL_COO]):
            raise SchemaError(
                COL_COO,
                f"Table {pos} has non-numeric '{COL_COO}' column "
                f"of dtype {df[COL_COO].dtype}",
            )

        df[COL_COO] = df[COL_COO] + delta
        return df
