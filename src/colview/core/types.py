"""
Element type tags for columns held by a storage engine.

ColumnType is the storage engine's type tag as seen by this core: a closed enum
whose serialized values are lower_snake. Descriptors carry it, FrameView.type_at
returns it, and summaries serialize its value.

Downstream usage
----------------
- colview.io.dtypes maps polars dtypes onto these tags.
- colview.core.schema serializes ``ColumnType.value`` into summaries.

Examples
--------
>>> from colview.core.types import ColumnType, column_type_from_value, is_numeric
>>> column_type_from_value("F64") is ColumnType.F64
True
>>> is_numeric(ColumnType.STR)
False
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Final

__all__ = [
    "ColumnType",
    "column_type_from_value",
    "is_numeric",
    "is_temporal",
    "is_lower_snake",
]


class ColumnType(Enum):
    """
    Type tag of a column's elements.

    Notes:
      UNKNOWN is reserved for dtypes the storage engine exposes but this core
      does not classify; readers decide whether to accept it (see
      IoSettings.strict_types).
    """

    BOOL = "bool"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"
    STR = "str"
    CATEGORICAL = "categorical"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    DURATION = "duration"
    BINARY = "binary"
    LIST = "list"
    STRUCT = "struct"
    NULL = "null"
    UNKNOWN = "unknown"


_NUMERIC: Final[frozenset[ColumnType]] = frozenset(
    {
        ColumnType.I8,
        ColumnType.I16,
        ColumnType.I32,
        ColumnType.I64,
        ColumnType.U8,
        ColumnType.U16,
        ColumnType.U32,
        ColumnType.U64,
        ColumnType.F32,
        ColumnType.F64,
    }
)

_TEMPORAL: Final[frozenset[ColumnType]] = frozenset(
    {ColumnType.DATE, ColumnType.TIME, ColumnType.DATETIME, ColumnType.DURATION}
)

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


def is_lower_snake(value: str) -> bool:
    """Return True if value matches lower_snake (e.g., "copy_column_slice")."""
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def column_type_from_value(value: str) -> ColumnType:
    """
    Normalize a serialized type tag and return the matching ColumnType.

    Args:
      value (str): Tag such as "i64" or "Datetime"; surrounding whitespace and
        case are ignored.

    Returns:
      ColumnType: Matching enum member.

    Raises:
      ValueError: If value is not a known type tag.
    """
    s = (value or "").strip().lower()
    try:
        return ColumnType(s)
    except ValueError as exc:
        raise ValueError(f"unknown column type {value!r}") from exc


def is_numeric(t: ColumnType) -> bool:
    return t in _NUMERIC


def is_temporal(t: ColumnType) -> bool:
    return t in _TEMPORAL
