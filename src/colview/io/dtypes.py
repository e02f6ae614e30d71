"""
Polars dtype classification into colview.core.types.ColumnType tags.

Purpose
- Give every polars column a ColumnType so FrameView.type_at and column
  descriptors never need to know about polars.

Rules
- Parametrized dtypes (Datetime(tz), List(inner), Struct(fields), ...) are
  classified by their base type; parameters are not encoded in the tag.
- Enum and Categorical both map to "categorical"; Array maps to "list".
- Anything else (Decimal, Object, ...) is unclassified: it raises IoSchemaError
  under strict typing and maps to ColumnType.UNKNOWN otherwise.
"""

from __future__ import annotations

import polars as pl

from colview.core.types import ColumnType

from .errors import IoSchemaError

# Note: Polars exposes dtype classes (e.g., pl.Int64) and instances (pl.Datetime("ms")).
# Lookups go through base_type() so both forms resolve to the class key.
_DTYPE_MAP: dict[object, ColumnType] = {
    pl.Boolean: ColumnType.BOOL,
    pl.Int8: ColumnType.I8,
    pl.Int16: ColumnType.I16,
    pl.Int32: ColumnType.I32,
    pl.Int64: ColumnType.I64,
    pl.UInt8: ColumnType.U8,
    pl.UInt16: ColumnType.U16,
    pl.UInt32: ColumnType.U32,
    pl.UInt64: ColumnType.U64,
    pl.Float32: ColumnType.F32,
    pl.Float64: ColumnType.F64,
    pl.Utf8: ColumnType.STR,
    pl.Categorical: ColumnType.CATEGORICAL,
    pl.Enum: ColumnType.CATEGORICAL,
    pl.Date: ColumnType.DATE,
    pl.Time: ColumnType.TIME,
    pl.Datetime: ColumnType.DATETIME,
    pl.Duration: ColumnType.DURATION,
    pl.Binary: ColumnType.BINARY,
    pl.List: ColumnType.LIST,
    pl.Array: ColumnType.LIST,
    pl.Struct: ColumnType.STRUCT,
    pl.Null: ColumnType.NULL,
}


def column_type_for(dtype: pl.DataType, *, strict: bool = True, name: str | None = None) -> ColumnType:
    """
    Classify a polars dtype.

    Args:
        dtype (pl.DataType): Dtype class or instance.
        strict (bool): Raise on unclassified dtypes instead of returning UNKNOWN.
        name (str | None): Column name, used in the error message only.

    Returns:
        ColumnType: Tag for the dtype.

    Raises:
        IoSchemaError: If the dtype is unclassified and ``strict`` is True.
    """
    tag = _DTYPE_MAP.get(dtype.base_type())
    if tag is not None:
        return tag
    if strict:
        where = f" for column {name!r}" if name is not None else ""
        raise IoSchemaError(f"unsupported dtype {dtype}{where}")
    return ColumnType.UNKNOWN


def schema_types(df: pl.DataFrame, *, strict: bool = True) -> list[ColumnType]:
    """Classify every column of ``df`` in column order."""
    return [column_type_for(dtype, strict=strict, name=name) for name, dtype in df.schema.items()]
