"""
colview.io: polars storage adapter for colview views.

## Responsibilities
- Implement the MaterializedTable protocol over polars DataFrames (PolarsTable).
- Classify polars dtypes into ColumnType tags.
- Read CSV/TSV/Parquet/IPC files into materialized FrameViews.

## Public API
- IoSettings: reader and typing configuration (env > TOML > defaults).
- PolarsTable: MaterializedTable over a polars DataFrame.
- read_table / read_view: file readers.

## Import DAG discipline
- Depends on stdlib, polars, and colview.core.*; colview.core never imports this package
  at runtime.

## Examples
```python
import polars as pl
from colview.io import PolarsTable
from colview.core import FrameView

view = FrameView(PolarsTable(pl.DataFrame({"tick": [0, 1], "price": [1.5, 2.5]})))
view.type_at(1)  # ColumnType.F64
```
"""

from __future__ import annotations

from .config import IoSettings
from .read import read_table, read_view
from .table import PolarsTable

__all__ = [
    "IoSettings",
    "PolarsTable",
    "read_table",
    "read_view",
]
