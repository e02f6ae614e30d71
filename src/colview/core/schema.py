"""
Typed summaries of frame views for logs, debugging, and fingerprints.

FrameView.summary() returns a FrameSummary; colview.core.hashing fingerprints
it over canonical JSON. Models forbid extra fields and validate enum-like
strings so a summary can be round-tripped through JSON and compared.

Notes:
    - Summaries describe the logical window only; ancestor entries of the
      column log are reflected in ``log_size`` but not listed.
    - Pending transformations are listed in the order they were recorded.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .slices import IndexSpec
from .transforms import TransformKind
from .types import column_type_from_value

__all__ = [
    "ColumnSummary",
    "TransformSummary",
    "FrameSummary",
]


class ColumnSummary(BaseModel):
    """
    One logical column.

    Attributes:
        name (str): Column name.
        type (str): ColumnType serialized value (lower_snake).
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    type: str

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, v: Any) -> str:
        value = getattr(v, "value", v)
        return column_type_from_value(str(value)).value


class TransformSummary(BaseModel):
    """
    One deferred transformation.

    Attributes:
        kind (str): TransformKind serialized value.
        source_index (int | None): Set for copy_single_column.
        indices (str | None): Slice-list text, set for copy_column_slice.
    """

    model_config = ConfigDict(extra="forbid")

    kind: str
    source_index: int | None = None
    indices: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def _check_kind(cls, v: Any) -> str:
        value = getattr(v, "value", v)
        try:
            return TransformKind(value).value
        except ValueError as exc:
            raise ValueError(f"unknown transformation kind {v!r}") from exc

    @field_validator("indices", mode="before")
    @classmethod
    def _canonical_indices(cls, v: Any) -> Any:
        if v is None:
            return v
        return IndexSpec.coerce(v).text()


class FrameSummary(BaseModel):
    """
    Snapshot of a FrameView.

    Attributes:
        mode (Literal["materialized","blueprint"]): Representation in effect.
        row_count (int): Number of rows.
        column_count (int): Number of logical columns.
        log_size (int): Physical column log length (0 when materialized).
        exclusive (bool): Whether the view was exclusively owned.
        columns (list[ColumnSummary]): Logical columns in order.
        deferred_ops (list[TransformSummary]): Pending transformations.
    """

    model_config = ConfigDict(extra="forbid")

    mode: Literal["materialized", "blueprint"]
    row_count: int = Field(ge=0)
    column_count: int = Field(ge=0)
    log_size: int = Field(default=0, ge=0)
    exclusive: bool = True
    columns: list[ColumnSummary] = Field(default_factory=list)
    deferred_ops: list[TransformSummary] = Field(default_factory=list)
