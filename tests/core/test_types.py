import pytest

from colview.core.types import (
    ColumnType,
    column_type_from_value,
    is_lower_snake,
    is_numeric,
    is_temporal,
)


def test_all_type_values_lower_snake() -> None:
    for t in ColumnType:
        assert is_lower_snake(t.value), f"{t!r} value not lower_snake"


@pytest.mark.parametrize("raw,expected", [("i64", ColumnType.I64), (" F64 ", ColumnType.F64), ("Str", ColumnType.STR)])
def test_column_type_from_value_normalizes(raw: str, expected: ColumnType) -> None:
    assert column_type_from_value(raw) is expected


def test_column_type_from_value_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="unknown column type"):
        column_type_from_value("decimal128")


def test_numeric_and_temporal_groups() -> None:
    assert is_numeric(ColumnType.U16)
    assert not is_numeric(ColumnType.BOOL)
    assert is_temporal(ColumnType.DATETIME)
    assert not is_temporal(ColumnType.STR)
