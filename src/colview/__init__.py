"""
colview: lazily-materializable, copy-on-write column views over tables.

Usage:
    from colview import FrameView, IndexSpec
    from colview.io import read_view

    view = read_view("trades.parquet")
    narrow = view.keep_columns(IndexSpec.parse("[3 0 1]"))
    print(narrow.summary())
"""

from __future__ import annotations

from .core import ColumnDescriptor, ColumnType, FrameView, IndexSpec

__version__ = "0.1.0"

__all__ = [
    "ColumnDescriptor",
    "ColumnType",
    "FrameView",
    "IndexSpec",
]
