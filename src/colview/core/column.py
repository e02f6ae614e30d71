"""
Column descriptors: name + element type, with optional provenance.

A descriptor extracted from a materialized table remembers where it came from
(a weak reference to the table and a reference to its column storage). A
descriptor declared from a bare name and type carries no provenance; these are
the placeholders a blueprint view appends for columns that have not been
computed yet.

Notes:
    - Provenance is informational only. It never decides the lifetime or
      ownership of the descriptor, and is excluded from equality.
    - Descriptors are immutable; FrameView clones them instead of sharing them
      between views.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .types import ColumnType

if TYPE_CHECKING:
    from .frame import MaterializedTable

__all__ = ["ColumnDescriptor"]


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Immutable description of one column.

    Attributes:
        name (str): Column name.
        type (ColumnType): Element type tag as reported by the storage engine.
        source_storage (Any | None): Storage handle the column was extracted
            from (e.g., a polars Series), or None for synthetic columns.
        source_ref (weakref.ref | None): Weak reference to the source table, or
            None for synthetic columns and tables that cannot be weakly
            referenced.

    Examples:
        >>> from colview.core.column import ColumnDescriptor
        >>> from colview.core.types import ColumnType
        >>> c = ColumnDescriptor("price", ColumnType.F64)
        >>> c.name, c.type.value, c.has_provenance
        ('price', 'f64', False)
    """

    name: str
    type: ColumnType
    source_storage: Any = field(default=None, compare=False, repr=False)
    source_ref: weakref.ReferenceType[Any] | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_table(cls, table: MaterializedTable, index: int) -> ColumnDescriptor:
        """
        Extract the descriptor of column ``index`` from a materialized table.

        The table is referenced weakly; the storage handle strongly. Tables
        that do not support weak references (e.g. slotted classes without
        ``__weakref__``) keep only the storage handle.
        """
        try:
            ref = weakref.ref(table)
        except TypeError:
            ref = None
        return cls(
            name=table.column_name(index),
            type=table.column_type(index),
            source_storage=table.column_storage(index),
            source_ref=ref,
        )

    @property
    def source_table(self) -> MaterializedTable | None:
        """Table this column was extracted from, or None if synthetic or collected."""
        if self.source_ref is None:
            return None
        return self.source_ref()

    @property
    def has_provenance(self) -> bool:
        return self.source_ref is not None or self.source_storage is not None

    def clone(self) -> ColumnDescriptor:
        return ColumnDescriptor(self.name, self.type, self.source_storage, self.source_ref)
