"""
Deferred transformation records kept by blueprint-mode views.

Each record describes one column-selection step that has not been applied to
real data. The set is closed: a materializer matches on the record class and
interprets it against the true data source.

- CopySingleColumn(source_index): one column copied from logical position
  ``source_index`` of the window in effect when the record was made.
- CopyColumnSlice(indices): several columns copied, in the order given by an
  IndexSpec against that same window.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .slices import IndexSpec

__all__ = [
    "TransformKind",
    "CopySingleColumn",
    "CopyColumnSlice",
    "Transform",
    "describe_transform",
]


class TransformKind(Enum):
    COPY_SINGLE_COLUMN = "copy_single_column"
    COPY_COLUMN_SLICE = "copy_column_slice"


@dataclass(frozen=True, slots=True)
class CopySingleColumn:
    source_index: int

    @property
    def kind(self) -> TransformKind:
        return TransformKind.COPY_SINGLE_COLUMN


@dataclass(frozen=True, slots=True)
class CopyColumnSlice:
    indices: IndexSpec

    @property
    def kind(self) -> TransformKind:
        return TransformKind.COPY_COLUMN_SLICE


Transform = CopySingleColumn | CopyColumnSlice


def describe_transform(t: Transform) -> dict[str, Any]:
    """
    Return a JSON-ready description of a transformation record.

    Examples:
        >>> describe_transform(CopySingleColumn(2))
        {'kind': 'copy_single_column', 'source_index': 2, 'indices': None}
    """
    if isinstance(t, CopySingleColumn):
        return {"kind": t.kind.value, "source_index": t.source_index, "indices": None}
    if isinstance(t, CopyColumnSlice):
        return {"kind": t.kind.value, "source_index": None, "indices": t.indices.text()}
    raise TypeError(f"unknown transformation record {t!r}")
