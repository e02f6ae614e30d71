"""Tests for `colview.core.slices` index specifications."""

import pytest

from colview.core.errors import IndexSpecError
from colview.core.slices import IndexSpec, Run


def test_of_merges_consecutive_ascending_indices() -> None:
    spec = IndexSpec.of(0, 1, 2, 5, 6)

    assert spec.runs == (Run(0, 3), Run(5, 2))
    assert spec.to_list() == [0, 1, 2, 5, 6]
    assert len(spec) == 5


def test_of_keeps_reordering_and_duplicates() -> None:
    spec = IndexSpec.of(2, 0, 0)

    assert spec.to_list() == [2, 0, 0]
    assert spec.is_dense() is False


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0:3 5", [0, 1, 2, 5]),
        ("[0:3, 5]", [0, 1, 2, 5]),
        ("[1 0]", [1, 0]),
        ("0:10:3", [0, 3, 6, 9]),
        ("4:0:-2", [4, 2]),
        ("[]", []),
        ("  7  ", [7]),
    ],
)
def test_parse_slice_list_text(text: str, expected: list[int]) -> None:
    assert IndexSpec.parse(text).to_list() == expected


@pytest.mark.parametrize("bad", ["1:", ":3", "a", "1:2:0", "[0 1", "0:1:2:3", "1.5"])
def test_parse_rejects_malformed_text(bad: str) -> None:
    with pytest.raises(IndexSpecError):
        IndexSpec.parse(bad)


def test_parsed_and_constructed_specs_compare_equal() -> None:
    assert IndexSpec.parse("[0:3]") == IndexSpec.from_range(0, 3)
    assert IndexSpec.parse("0 1 2") == IndexSpec.from_range(0, 3)
    assert IndexSpec.from_runs([Run(0, 2), Run(2, 1)]) == IndexSpec.of(0, 1, 2)


def test_text_form() -> None:
    spec = IndexSpec.parse("[0:3 5 10:16:2]")

    assert spec.text() == "[0:3 5 10:16:2]"
    assert repr(spec) == "IndexSpec([0:3 5 10:16:2])"


@pytest.mark.parametrize(
    "value,expected",
    [
        (3, [3]),
        (range(1, 4), [1, 2, 3]),
        (slice(2, 4), [2, 3]),
        ([1, 0], [1, 0]),
        ((0, 2), [0, 2]),
        ("1:3", [1, 2]),
    ],
)
def test_coerce_accepts_loose_forms(value: object, expected: list[int]) -> None:
    assert IndexSpec.coerce(value).to_list() == expected


@pytest.mark.parametrize("bad", [slice(None, 3), slice(1, None), [1, "2"], [True], 1.0])
def test_coerce_rejects_unusable_values(bad: object) -> None:
    with pytest.raises(IndexSpecError):
        IndexSpec.coerce(bad)


def test_dense_and_trailing_run() -> None:
    assert IndexSpec.from_range(2, 5).is_trailing_run(5) is True
    assert IndexSpec.from_range(2, 4).is_trailing_run(5) is False
    assert IndexSpec.of(3).is_trailing_run(4) is True
    assert IndexSpec.of(4, 3).is_trailing_run(5) is False
    assert IndexSpec.from_range(-1, 2).is_trailing_run(2) is False
    assert IndexSpec().is_trailing_run(5) is True


def test_direct_construction_normalizes_runs() -> None:
    spec = IndexSpec((Run(2, 1), Run(3, 1), Run(7, 0), Run(5, 1, 4)))

    assert spec.runs == (Run(2, 2), Run(5, 1))
    assert spec == IndexSpec.of(2, 3, 5)
    assert IndexSpec((Run(2, 1), Run(3, 1))).is_dense() is True


def test_first_min_max() -> None:
    spec = IndexSpec.parse("[4 0:2 9:5:-2]")

    assert spec.first() == 4
    assert spec.min() == 0
    assert spec.max() == 9

    with pytest.raises(IndexSpecError):
        IndexSpec().first()


def test_run_rejects_negative_count_and_zero_step() -> None:
    with pytest.raises(IndexSpecError):
        Run(0, -1)
    with pytest.raises(IndexSpecError):
        Run(0, 2, 0)
