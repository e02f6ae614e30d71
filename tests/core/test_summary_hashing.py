import pytest
from pydantic import ValidationError

from colview.core.frame import FrameView
from colview.core.hashing import hash_summary, json_dumps_canonical
from colview.core.schema import ColumnSummary, FrameSummary, TransformSummary
from colview.core.transforms import CopyColumnSlice, CopySingleColumn, describe_transform
from colview.core.slices import IndexSpec


def test_summary_of_materialized_view(trades_table) -> None:
    s = FrameView(trades_table).summary()

    assert s.mode == "materialized"
    assert s.column_count == 4
    assert s.log_size == 0
    assert [c.name for c in s.columns] == trades_table.names
    assert [c.type for c in s.columns] == ["i64", "f64", "str", "i32"]
    assert s.deferred_ops == []


def test_summary_of_blueprint_lists_pending_ops(trades_table) -> None:
    view = FrameView(trades_table).keep_columns(range(4))
    view.keep_columns([2, 0])
    view.keep_columns([1, 1])
    view.keep_columns([0])

    s = view.summary()

    assert s.mode == "blueprint"
    assert s.log_size == 9
    assert [op.kind for op in s.deferred_ops] == [
        "copy_column_slice",
        "copy_column_slice",
        "copy_single_column",
    ]
    assert s.deferred_ops[0].indices == "[2 0]"
    assert s.deferred_ops[2].source_index == 0


def test_fingerprint_tracks_shape_not_ownership(trades_table) -> None:
    a = FrameView(trades_table).keep_columns([1, 0])
    b = FrameView(trades_table).keep_columns([1, 0]).mark_shared()
    c = FrameView(trades_table).keep_columns([0, 1])

    assert a.fingerprint() == b.fingerprint()
    assert a.fingerprint() != c.fingerprint()
    assert len(a.fingerprint()) == 64


def test_hash_summary_is_order_insensitive_on_keys() -> None:
    s = FrameSummary(mode="blueprint", row_count=1, column_count=0)

    assert hash_summary(s) == hash_summary(FrameSummary.model_validate_json(s.model_dump_json()))
    assert json_dumps_canonical({"b": 1, "a": 2}) == '{"a":2,"b":1}'


def test_describe_transform_feeds_transform_summary() -> None:
    single = TransformSummary(**describe_transform(CopySingleColumn(3)))
    sliced = TransformSummary(**describe_transform(CopyColumnSlice(IndexSpec.of(1, 0))))

    assert single.kind == "copy_single_column"
    assert single.source_index == 3
    assert sliced.indices == "[1 0]"


def test_summary_models_reject_bad_values() -> None:
    with pytest.raises(ValidationError):
        ColumnSummary(name="x", type="decimal")
    with pytest.raises(ValidationError):
        TransformSummary(kind="materialize")
    with pytest.raises(ValidationError):
        FrameSummary(mode="stone", row_count=0, column_count=0)
    with pytest.raises(ValidationError):
        FrameSummary(mode="blueprint", row_count=-1, column_count=0)
