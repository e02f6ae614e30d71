from __future__ import annotations

from typing import Any

import pytest

from colview.core.constants import NOT_FOUND
from colview.core.types import ColumnType


class FakeTable:
    """In-memory MaterializedTable with list-backed columns; records type lookups."""

    def __init__(self, columns: list[tuple[str, ColumnType, list[Any]]]) -> None:
        self.names = [c[0] for c in columns]
        self.types = [c[1] for c in columns]
        self.data = [c[2] for c in columns]
        self.type_calls: list[int] = []

    def num_columns(self) -> int:
        return len(self.names)

    def num_rows(self) -> int:
        return len(self.data[0]) if self.data else 0

    def column_name(self, i: int) -> str:
        return self.names[i]

    def column_type(self, i: int) -> ColumnType:
        self.type_calls.append(i)
        return self.types[i]

    def column_storage(self, i: int) -> list[Any]:
        return self.data[i]

    def find_column_index(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            return NOT_FOUND


@pytest.fixture
def trades_table() -> FakeTable:
    return FakeTable(
        [
            ("tick", ColumnType.I64, [0, 1, 2, 3]),
            ("price", ColumnType.F64, [10.0, 10.5, 10.25, 11.0]),
            ("side", ColumnType.STR, ["buy", "sell", "buy", "buy"]),
            ("qty", ColumnType.I32, [5, 1, 2, 8]),
        ]
    )
