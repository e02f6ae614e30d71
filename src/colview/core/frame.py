"""
FrameView: a lazily-materializable, copy-on-write view over a table.

A FrameView exists in one of two modes:

- materialized: a thin wrapper around a table held by the storage engine.
  Construction is O(1); no column is touched.
- blueprint: no backing data. The view records column identity and type in an
  append-only ColumnLog plus the list of transformations that would produce
  the data.

Column selection (keep_columns) always yields a blueprint. From a
materialized receiver it extracts one descriptor per requested column. From a
blueprint receiver it either narrows the log window (selecting a trailing run
is free) or appends synthetic descriptors and records one deferred
transformation.

Ownership
---------
A view is exclusive until mark_shared() is called; the flag never resets.
keep_columns_inplace() mutates the receiver and therefore requires
exclusivity. keep_columns() is the copy-on-write entry point: on a shared
receiver it works on a fresh view and leaves the receiver untouched.

Examples
--------
>>> import polars as pl
>>> from colview.io.table import PolarsTable
>>> from colview.core.frame import FrameView
>>> view = FrameView(PolarsTable(pl.DataFrame({"a": [1], "b": [2.0], "c": ["x"]})))
>>> picked = view.keep_columns([2, 0])
>>> picked.is_materialized, picked.column_names()
(False, ['c', 'a'])
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from .column import ColumnDescriptor
from .columnlog import ColumnLog
from .constants import NOT_FOUND
from .errors import IndexOutOfRange, InvalidUnwrap, OwnershipViolation
from .hashing import hash_summary
from .schema import ColumnSummary, FrameSummary, TransformSummary
from .slices import IndexSpec
from .transforms import CopyColumnSlice, CopySingleColumn, Transform, describe_transform
from .types import ColumnType, column_type_from_value

__all__ = [
    "MaterializedTable",
    "Materialized",
    "Blueprint",
    "FrameView",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class MaterializedTable(Protocol):
    """Storage-engine table as consumed by FrameView. Indices are 0-based."""

    def num_columns(self) -> int: ...

    def num_rows(self) -> int: ...

    def column_name(self, i: int) -> str: ...

    def column_type(self, i: int) -> ColumnType: ...

    def column_storage(self, i: int) -> Any: ...

    def find_column_index(self, name: str) -> int: ...


@dataclass(slots=True)
class Materialized:
    table: MaterializedTable


@dataclass(slots=True)
class Blueprint:
    log: ColumnLog
    ops: list[Transform] = field(default_factory=list)

    def clone(self) -> Blueprint:
        return Blueprint(self.log.clone(), list(self.ops))


class FrameView:
    """
    Dual-mode columnar view.

    Args:
        table (MaterializedTable): Table to wrap. The view starts materialized
            and exclusive.

    Notes:
        - The mode is the class of ``_state`` (Materialized or Blueprint); no
          other attribute records it.
        - In blueprint mode the logical column count is the width of the
          column log window; ``_ncols`` is kept equal to it after every
          selection.
    """

    def __init__(self, table: MaterializedTable) -> None:
        self._state: Materialized | Blueprint = Materialized(table)
        self._ncols = table.num_columns()
        self._nrows = table.num_rows()
        self._exclusive = True

    @classmethod
    def _make(cls, state: Materialized | Blueprint, ncols: int, nrows: int) -> FrameView:
        view = cls.__new__(cls)
        view._state = state
        view._ncols = ncols
        view._nrows = nrows
        view._exclusive = True
        return view

    @classmethod
    def from_columns(
        cls,
        columns: Iterable[ColumnDescriptor | tuple[str, ColumnType | str]],
        row_count: int,
    ) -> FrameView:
        """
        Declare a blueprint view from column names and types.

        Args:
            columns: ColumnDescriptors or (name, type) pairs; types may be
                ColumnType members or their serialized values.
            row_count (int): Number of rows the eventual table will have.

        Returns:
            FrameView: Exclusive blueprint view with no pending transformations.
        """
        if row_count < 0:
            raise ValueError(f"row_count must be non-negative, got {row_count}")
        descs: list[ColumnDescriptor] = []
        for c in columns:
            if isinstance(c, ColumnDescriptor):
                descs.append(c.clone())
            else:
                name, t = c
                if not isinstance(t, ColumnType):
                    t = column_type_from_value(t)
                descs.append(ColumnDescriptor(name, t))
        log = ColumnLog(descs)
        return cls._make(Blueprint(log), log.width, row_count)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def is_materialized(self) -> bool:
        return isinstance(self._state, Materialized)

    @property
    def column_count(self) -> int:
        """Number of logical (output) columns; ancestor log entries are not counted."""
        return self._ncols

    @property
    def row_count(self) -> int:
        return self._nrows

    @property
    def exclusive(self) -> bool:
        return self._exclusive

    @property
    def log_size(self) -> int:
        if isinstance(self._state, Blueprint):
            return len(self._state.log)
        return 0

    @property
    def deferred_ops(self) -> tuple[Transform, ...]:
        if isinstance(self._state, Blueprint):
            return tuple(self._state.ops)
        return ()

    def column_at(self, i: int) -> ColumnDescriptor | None:
        """
        Descriptor of logical column ``i`` in blueprint mode.

        Returns None for a materialized view, which keeps no descriptors; use
        type_at() or the table itself there.

        Raises:
            IndexOutOfRange: If ``i`` is outside the logical window.
        """
        if isinstance(self._state, Blueprint):
            return self._state.log.logical(i)
        return None

    def type_at(self, i: int) -> ColumnType:
        """Type of logical column ``i``; never forces materialization."""
        self._check_index(i)
        if isinstance(self._state, Materialized):
            return self._state.table.column_type(i)
        return self._state.log.logical(i).type

    def column_names(self) -> list[str]:
        if isinstance(self._state, Materialized):
            table = self._state.table
            return [table.column_name(i) for i in range(self._ncols)]
        return [c.name for c in self._state.log.window()]

    def find_column_by_name(self, name: str) -> int:
        """
        Return the logical index of the first column named ``name``, or -1.

        Note: in blueprint mode this is a linear O(column_count) scan, so it is
        a poor fit for bulk lookup of many names; build a name index instead.
        """
        if isinstance(self._state, Materialized):
            return self._state.table.find_column_index(name)
        for i, column in enumerate(self._state.log.window()):
            if column.name == name:
                return i
        return NOT_FOUND

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------
    def mark_shared(self) -> FrameView:
        """Declare that more than one holder references this view. Permanent."""
        self._exclusive = False
        return self

    def copy(self) -> FrameView:
        """New exclusive view with the same logical contents."""
        if isinstance(self._state, Materialized):
            return self._make(Materialized(self._state.table), self._ncols, self._nrows)
        state = self._state.clone()
        return self._make(state, state.log.width, self._nrows)

    def unwrap_materialized(self) -> MaterializedTable:
        if isinstance(self._state, Blueprint):
            raise InvalidUnwrap("Cannot unwrap a blueprint-mode FrameView")
        return self._state.table

    # ------------------------------------------------------------------
    # Column selection
    # ------------------------------------------------------------------
    def keep_columns(self, indices: Any) -> FrameView:
        """
        Select logical columns, returning a view of the selection.

        Args:
            indices: IndexSpec or anything IndexSpec.coerce accepts. Positions
                may repeat and appear in any order.

        Returns:
            FrameView: The receiver itself when it is exclusive; otherwise a
            new exclusive view (the receiver is left unchanged).

        Raises:
            IndexOutOfRange: If any index is outside [0, column_count). The
                receiver is unchanged.
        """
        spec = IndexSpec.coerce(indices)
        if self._exclusive:
            return self.keep_columns_inplace(spec)
        self._check_spec(spec)
        if isinstance(self._state, Materialized):
            logger.debug("keep_columns: shared materialized view, extracting %d columns", spec.size)
            result = self._make(Materialized(self._state.table), self._ncols, self._nrows)
        else:
            logger.debug("keep_columns: shared blueprint view, cloning log of %d", self.log_size)
            result = self.copy()
        return result.keep_columns_inplace(spec)

    def keep_columns_inplace(self, indices: Any) -> FrameView:
        """
        Select logical columns by mutating the receiver.

        Raises:
            OwnershipViolation: If the receiver has been marked shared.
            IndexOutOfRange: If any index is outside [0, column_count).
        """
        spec = IndexSpec.coerce(indices)
        if not self._exclusive:
            raise OwnershipViolation("keep_columns_inplace called on a shared FrameView")
        self._check_spec(spec)

        state = self._state
        if isinstance(state, Materialized):
            log = ColumnLog(ColumnDescriptor.from_table(state.table, i) for i in spec)
            self._state = Blueprint(log)
            self._ncols = log.width
            logger.debug("keep_columns: materialized -> blueprint with %d columns", log.width)
            return self

        log = state.log
        if spec.is_trailing_run(log.width):
            # The window already exposes exactly this suffix of the log.
            log.set_width(spec.size)
            self._ncols = log.width
            logger.debug("keep_columns: trailing run %s, window narrowed", spec.text())
            return self

        picked = [log.logical(i) for i in spec]
        for column in picked:
            log.append(ColumnDescriptor(column.name, column.type))
        log.set_width(len(picked))
        self._ncols = log.width
        if len(picked) == 1:
            state.ops.append(CopySingleColumn(spec.first()))
        else:
            state.ops.append(CopyColumnSlice(spec))
        logger.debug(
            "keep_columns: deferred %s, log size %d, %d pending ops",
            spec.text(),
            len(log),
            len(state.ops),
        )
        return self

    # ------------------------------------------------------------------
    # Summaries
    # ------------------------------------------------------------------
    def summary(self) -> FrameSummary:
        names = self.column_names()
        columns = [
            ColumnSummary(name=name, type=self.type_at(i)) for i, name in enumerate(names)
        ]
        return FrameSummary(
            mode="materialized" if self.is_materialized else "blueprint",
            row_count=self._nrows,
            column_count=self.column_count,
            log_size=self.log_size,
            exclusive=self._exclusive,
            columns=columns,
            deferred_ops=[TransformSummary(**describe_transform(t)) for t in self.deferred_ops],
        )

    def fingerprint(self) -> str:
        return hash_summary(self.summary())

    def __repr__(self) -> str:
        mode = "materialized" if self.is_materialized else "blueprint"
        shared = "" if self._exclusive else ", shared"
        return f"FrameView({mode}, {self._nrows} rows x {self.column_count} cols{shared})"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _check_index(self, i: int) -> None:
        n = self.column_count
        if i < 0 or i >= n:
            raise IndexOutOfRange(i, n)

    def _check_spec(self, spec: IndexSpec) -> None:
        n = self.column_count
        for run in spec.runs:
            lo, hi = min(run.start, run.last), max(run.start, run.last)
            if lo >= 0 and hi < n:
                continue
            for i in run:
                if i < 0 or i >= n:
                    raise IndexOutOfRange(i, n)
