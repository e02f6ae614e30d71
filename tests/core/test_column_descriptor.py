import dataclasses
import gc

import pytest

from colview.core.column import ColumnDescriptor
from colview.core.frame import FrameView, MaterializedTable
from colview.core.types import ColumnType


def test_from_table_extracts_name_type_and_provenance(trades_table) -> None:
    col = ColumnDescriptor.from_table(trades_table, 1)

    assert col.name == "price"
    assert col.type is ColumnType.F64
    assert col.has_provenance is True
    assert col.source_table is trades_table
    assert col.source_storage is trades_table.data[1]


def test_synthetic_descriptor_has_no_provenance() -> None:
    col = ColumnDescriptor("side", ColumnType.STR)

    assert col.has_provenance is False
    assert col.source_table is None
    assert col.source_storage is None


def test_descriptor_is_immutable() -> None:
    col = ColumnDescriptor("side", ColumnType.STR)

    with pytest.raises(dataclasses.FrozenInstanceError):
        col.name = "other"  # type: ignore[misc]


def test_equality_ignores_provenance(trades_table) -> None:
    extracted = ColumnDescriptor.from_table(trades_table, 2)

    assert extracted == ColumnDescriptor("side", ColumnType.STR)


class _OneColumnTable:
    def column_name(self, i: int) -> str:
        return "tick"

    def column_type(self, i: int) -> ColumnType:
        return ColumnType.I64

    def column_storage(self, i: int) -> list[int]:
        return [0, 1, 2]


def test_source_table_reference_is_weak() -> None:
    table = _OneColumnTable()
    col = ColumnDescriptor.from_table(table, 0)  # type: ignore[arg-type]
    linked = col.source_table is table
    assert linked

    del table
    gc.collect()

    # Provenance does not keep the table alive; the storage handle survives.
    assert col.source_table is None
    assert col.has_provenance is True
    assert col.source_storage == [0, 1, 2]


def test_clone_is_a_distinct_equal_descriptor(trades_table) -> None:
    col = ColumnDescriptor.from_table(trades_table, 0)
    twin = col.clone()

    assert twin == col
    assert twin is not col
    assert twin.source_table is trades_table


class _SlottedTable:
    __slots__ = ("names",)

    def __init__(self) -> None:
        self.names = ["tick", "side"]

    def num_columns(self) -> int:
        return len(self.names)

    def num_rows(self) -> int:
        return 2

    def column_name(self, i: int) -> str:
        return self.names[i]

    def column_type(self, i: int) -> ColumnType:
        return ColumnType.I64 if i == 0 else ColumnType.STR

    def column_storage(self, i: int) -> list[object]:
        return [[0, 1], ["b", "s"]][i]

    def find_column_index(self, name: str) -> int:
        return self.names.index(name) if name in self.names else -1


def test_table_without_weakref_support_keeps_storage_only() -> None:
    table = _SlottedTable()

    col = ColumnDescriptor.from_table(table, 1)  # type: ignore[arg-type]

    assert col.source_ref is None
    assert col.source_table is None
    assert col.source_storage == ["b", "s"]
    assert col.has_provenance is True


def test_selection_over_table_without_weakref_support() -> None:
    table = _SlottedTable()
    assert isinstance(table, MaterializedTable)

    view = FrameView(table).keep_columns([1, 0])  # type: ignore[arg-type]

    assert view.column_names() == ["side", "tick"]
    assert view.type_at(0) is ColumnType.STR
