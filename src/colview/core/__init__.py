"""
Core package for colview: frame views, column descriptors, index specs, errors.

## Contracts
- FrameView: dual-mode (materialized / blueprint) copy-on-write view.
- ColumnDescriptor: immutable name + type record with optional provenance.
- ColumnLog: append-only descriptor arena with a trailing logical window.
- IndexSpec: ordered multiset of column indices stored as runs.
- Transforms: closed set of deferred transformation records.
- Summaries/Hashing: pydantic snapshots and SHA-256 fingerprints.

## Notes
- Zero-IO policy: stdlib + pydantic only. Storage engines are reached through
  the MaterializedTable protocol; colview.io provides a polars implementation.
- Mutating operations honor the exclusivity flag; see FrameView.keep_columns.

## Examples
```python
from colview.core import FrameView, IndexSpec

view = FrameView.from_columns([("a", "i64"), ("b", "f64"), ("c", "str")], row_count=10)
view.keep_columns(IndexSpec.parse("1:3"))  # trailing run: window narrowed, nothing recorded
view.column_names()  # ['b', 'c']
```
"""

from __future__ import annotations

from .column import ColumnDescriptor
from .columnlog import ColumnLog
from .constants import NOT_FOUND
from .errors import FrameError, IndexOutOfRange, IndexSpecError, InvalidUnwrap, OwnershipViolation
from .frame import Blueprint, FrameView, Materialized, MaterializedTable
from .schema import ColumnSummary, FrameSummary, TransformSummary
from .slices import IndexSpec, Run
from .transforms import CopyColumnSlice, CopySingleColumn, Transform, TransformKind
from .types import ColumnType

__all__ = [
    "ColumnDescriptor",
    "ColumnLog",
    "NOT_FOUND",
    "FrameError",
    "IndexOutOfRange",
    "IndexSpecError",
    "InvalidUnwrap",
    "OwnershipViolation",
    "Blueprint",
    "FrameView",
    "Materialized",
    "MaterializedTable",
    "ColumnSummary",
    "FrameSummary",
    "TransformSummary",
    "IndexSpec",
    "Run",
    "CopyColumnSlice",
    "CopySingleColumn",
    "Transform",
    "TransformKind",
    "ColumnType",
]
