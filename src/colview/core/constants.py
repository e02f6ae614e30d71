"""
colview core defaults.

Defines the lookup sentinel and the IO-facing defaults consumed by downstream
layers. This module is zero-IO and uses only the Python standard library.

Notes:
    - NOT_FOUND is returned by name lookups on both materialized tables and
      blueprint views; callers compare against it rather than catching errors.
    - IO defaults are the single source of truth for colview.io.config.IoSettings.
"""

from __future__ import annotations

__all__ = [
    "NOT_FOUND",
    "CSV_SEPARATOR",
    "INFER_SCHEMA_LENGTH",
    "STRICT_TYPES",
    "NULL_VALUES",
    "ENV_PREFIX",
]

# Sentinel returned by find_column_by_name / find_column_index when no column matches.
NOT_FOUND: int = -1

# Field separator used for CSV reads unless overridden (TSV files always use a tab).
CSV_SEPARATOR: str = ","

# Number of rows polars inspects to infer CSV column dtypes.
INFER_SCHEMA_LENGTH: int = 100

# When True, columns whose dtype has no ColumnType tag are rejected at read time.
STRICT_TYPES: bool = True

# Cell values read as null by the CSV reader.
NULL_VALUES: tuple[str, ...] = ("", "NA")

# Environment variable prefix for IoSettings.from_env.
ENV_PREFIX: str = "COLVIEW_IO_"
