"""
Read utilities that load table files into materialized views.

Overview
- read_table(): reads a file with polars into a PolarsTable.
- read_view(): wraps read_table() in a materialized FrameView.

Formats are chosen by suffix:
- .csv         polars.read_csv with IoSettings.csv_separator
- .tsv         polars.read_csv with a tab separator
- .parquet     polars.read_parquet
- .ipc/.arrow/.feather  polars.read_ipc

Notes
- Relative paths resolve against IoSettings.root_dir.
- CSV schema inference inspects IoSettings.infer_schema_length rows; cells
  matching IoSettings.null_values are read as null.
"""

from __future__ import annotations

import logging
import os

import polars as pl

from colview.core.frame import FrameView

from .config import IoSettings
from .errors import IoReadError
from .table import PolarsTable

logger = logging.getLogger(__name__)

_CSV_SUFFIXES = {".csv", ".tsv"}
_PARQUET_SUFFIXES = {".parquet"}
_IPC_SUFFIXES = {".ipc", ".arrow", ".feather"}


def _read_frame(path: os.PathLike[str], suffix: str, settings: IoSettings) -> pl.DataFrame:
    if suffix in _CSV_SUFFIXES:
        sep = "\t" if suffix == ".tsv" else settings.csv_separator
        return pl.read_csv(
            path,
            separator=sep,
            infer_schema_length=settings.infer_schema_length,
            null_values=list(settings.null_values),
        )
    if suffix in _PARQUET_SUFFIXES:
        return pl.read_parquet(path)
    return pl.read_ipc(path)


def read_table(path: str | os.PathLike[str], settings: IoSettings | None = None) -> PolarsTable:
    """
    Read a table file into a PolarsTable.

    Args:
        path (str | os.PathLike): File path; relative paths resolve against root_dir.
        settings (IoSettings | None): Reader settings; IoSettings.load() when None.

    Returns:
        PolarsTable: Materialized table with classified column types.

    Raises:
        colview.io.errors.IoConfigError: Settings are out of range.
        colview.io.errors.IoReadError: Missing file or unsupported suffix.
        colview.io.errors.IoSchemaError: Unsupported dtype under strict typing.
    """
    s = (settings or IoSettings.load()).validate()
    p = s.resolve(path)
    suffix = p.suffix.lower()
    if suffix not in _CSV_SUFFIXES | _PARQUET_SUFFIXES | _IPC_SUFFIXES:
        raise IoReadError(f"unsupported table format {suffix or '(none)'!r} for {str(p)!r}")
    if not p.is_file():
        raise IoReadError(f"table file not found: {str(p)!r}")

    df = _read_frame(p, suffix, s)
    logger.info("read %s: %d rows x %d cols", p, df.height, df.width)
    return PolarsTable(df, strict_types=s.strict_types)


def read_view(path: str | os.PathLike[str], settings: IoSettings | None = None) -> FrameView:
    """Read a table file and wrap it in a materialized, exclusive FrameView."""
    return FrameView(read_table(path, settings))
