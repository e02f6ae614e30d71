"""
Polars-backed materialized table.

PolarsTable implements colview.core.frame.MaterializedTable over an eager
polars DataFrame, so a FrameView can wrap data read by colview.io.read or built
in memory.

Notes:
    - Column types are classified once, at construction; a strict table with an
      unsupported dtype fails here rather than on first use.
    - The name index keeps the first position of each name, matching
      FrameView.find_column_by_name in blueprint mode.
    - The DataFrame is treated as read-only.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import polars as pl

from colview.core.constants import NOT_FOUND
from colview.core.errors import IndexOutOfRange
from colview.core.types import ColumnType

from .config import IoSettings
from .dtypes import schema_types


class PolarsTable:
    """
    MaterializedTable over a polars DataFrame.

    Args:
        df (pl.DataFrame): Frame to expose. LazyFrames must be collected first.
        strict_types (bool | None): Override of IoSettings.strict_types; when
            None the default settings apply.

    Raises:
        colview.io.errors.IoSchemaError: If a dtype is unsupported under strict typing.
    """

    def __init__(self, df: pl.DataFrame, *, strict_types: bool | None = None) -> None:
        if not isinstance(df, pl.DataFrame):
            raise TypeError(f"PolarsTable expects a polars DataFrame, got {type(df).__name__}")
        strict = IoSettings().strict_types if strict_types is None else strict_types
        self._df = df
        self._names: list[str] = list(df.columns)
        self._types: list[ColumnType] = schema_types(df, strict=strict)
        self._index: dict[str, int] = {}
        for i, name in enumerate(self._names):
            self._index.setdefault(name, i)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Sequence[Any]],
        *,
        strict_types: bool | None = None,
    ) -> PolarsTable:
        return cls(pl.DataFrame(data), strict_types=strict_types)

    @property
    def frame(self) -> pl.DataFrame:
        return self._df

    def num_columns(self) -> int:
        return len(self._names)

    def num_rows(self) -> int:
        return self._df.height

    def column_name(self, i: int) -> str:
        self._check(i)
        return self._names[i]

    def column_type(self, i: int) -> ColumnType:
        self._check(i)
        return self._types[i]

    def column_storage(self, i: int) -> pl.Series:
        self._check(i)
        return self._df.to_series(i)

    def find_column_index(self, name: str) -> int:
        return self._index.get(name, NOT_FOUND)

    def _check(self, i: int) -> None:
        if i < 0 or i >= len(self._names):
            raise IndexOutOfRange(i, len(self._names))

    def __repr__(self) -> str:
        return f"PolarsTable({self._df.height} rows x {len(self._names)} cols: {self._names})"
