"""
Index specifications: ordered multisets of logical column positions.

An IndexSpec is stored as a tuple of arithmetic runs rather than a flat list,
so dense ranges like ``0:1_000_000`` cost one Run regardless of their size. The
same spec may reorder and repeat positions (``[2 0 0]``); runs are kept in the
caller's order.

Text syntax
-----------
Items separated by whitespace and/or commas, optionally wrapped in ``[...]``:

- ``n``      a single index
- ``a:b``    indices a, a+1, ..., b-1
- ``a:b:s``  indices of ``range(a, b, s)``

Examples
--------
>>> from colview.core.slices import IndexSpec
>>> spec = IndexSpec.parse("[0:3 5]")
>>> spec.to_list()
[0, 1, 2, 5]
>>> IndexSpec.of(3, 4, 5).is_dense()
True
>>> IndexSpec.of(1, 0).is_dense()
False
"""

from __future__ import annotations

import operator
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Final

from .errors import IndexSpecError

__all__ = [
    "Run",
    "IndexSpec",
]

_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"[\s,]+")


@dataclass(frozen=True, slots=True)
class Run:
    """Arithmetic run of ``count`` indices starting at ``start`` with stride ``step``."""

    start: int
    count: int
    step: int = 1

    def __post_init__(self) -> None:
        if self.count < 0:
            raise IndexSpecError(f"Run count must be non-negative, got {self.count}")
        if self.step == 0:
            raise IndexSpecError("Run step must be non-zero")

    @property
    def last(self) -> int:
        return self.start + (self.count - 1) * self.step

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.start + self.count * self.step, self.step))

    def text(self) -> str:
        if self.count == 1:
            return str(self.start)
        stop = self.start + self.count * self.step
        if self.step == 1:
            return f"{self.start}:{stop}"
        return f"{self.start}:{stop}:{self.step}"


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise IndexSpecError(f"column index must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError as exc:
        raise IndexSpecError(f"column index must be an integer, got {value!r}") from exc


def _normalize(runs: Iterable[Run]) -> tuple[Run, ...]:
    # Drop empty runs, give singletons step 1, and merge contiguous step-1 runs.
    out: list[Run] = []
    for run in runs:
        if run.count == 0:
            continue
        if run.count == 1 and run.step != 1:
            run = Run(run.start, 1)
        if out:
            prev = out[-1]
            if prev.step == 1 and run.step == 1 and prev.start + prev.count == run.start:
                out[-1] = Run(prev.start, prev.count + run.count)
                continue
        out.append(run)
    return tuple(out)


def _parse_item(item: str) -> Run:
    parts = item.split(":")
    if len(parts) > 3:
        raise IndexSpecError(f"cannot parse index item {item!r}")
    if len(parts) > 1 and any(p == "" for p in parts):
        raise IndexSpecError(f"open-ended slice {item!r} is not allowed")
    try:
        nums = [int(p) for p in parts]
    except ValueError as exc:
        raise IndexSpecError(f"cannot parse index item {item!r}") from exc
    if len(nums) == 1:
        return Run(nums[0], 1)
    start, stop = nums[0], nums[1]
    step = nums[2] if len(nums) == 3 else 1
    if step == 0:
        raise IndexSpecError(f"slice step must be non-zero in {item!r}")
    return Run(start, len(range(start, stop, step)), step)


@dataclass(frozen=True, slots=True)
class IndexSpec:
    """
    Immutable ordered multiset of column indices.

    Attributes:
        runs (tuple[Run, ...]): Normalized runs in caller order.

    Notes:
        - The run list is normalized on construction, so equal selections
          compare equal however their runs were written.
        - Indices are not bounds-checked here; FrameView.keep_columns checks
          them against the receiver's column count.
    """

    runs: tuple[Run, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "runs", _normalize(self.runs))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def of(cls, *indices: int) -> IndexSpec:
        return cls.from_runs(Run(_as_int(i), 1) for i in indices)

    @classmethod
    def from_range(cls, start: int, stop: int, step: int = 1) -> IndexSpec:
        if step == 0:
            raise IndexSpecError("range step must be non-zero")
        r = range(_as_int(start), _as_int(stop), _as_int(step))
        return cls.from_runs([Run(r.start, len(r), r.step)])

    @classmethod
    def from_runs(cls, runs: Iterable[Run]) -> IndexSpec:
        return cls(tuple(runs))

    @classmethod
    def parse(cls, text: str) -> IndexSpec:
        """
        Parse slice-list text such as ``"[0:3, 5 7:10:2]"``.

        Raises:
            IndexSpecError: On unbalanced brackets, open-ended slices, zero
                steps, or non-integer items.
        """
        s = text.strip()
        if s.startswith("[") or s.endswith("]"):
            if not (s.startswith("[") and s.endswith("]")):
                raise IndexSpecError(f"unbalanced brackets in index list {text!r}")
            s = s[1:-1].strip()
        if not s:
            return cls()
        return cls.from_runs(_parse_item(item) for item in _SPLIT_RE.split(s) if item)

    @classmethod
    def coerce(cls, value: Any) -> IndexSpec:
        """
        Build an IndexSpec from the loose forms callers tend to pass.

        Accepts an IndexSpec, a single int, a range, a slice with explicit
        start and stop, slice-list text, or an iterable of ints.
        """
        if isinstance(value, IndexSpec):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, range):
            return cls.from_range(value.start, value.stop, value.step)
        if isinstance(value, slice):
            if value.start is None or value.stop is None:
                raise IndexSpecError(f"open-ended slice {value!r} is not allowed")
            step = 1 if value.step is None else value.step
            return cls.from_range(value.start, value.stop, step)
        if isinstance(value, Iterable):
            return cls.of(*value)
        return cls.of(value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return sum(run.count for run in self.runs)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        for run in self.runs:
            yield from run

    def to_list(self) -> list[int]:
        return list(self)

    def first(self) -> int:
        if not self.runs:
            raise IndexSpecError("empty index specification has no first element")
        return self.runs[0].start

    def min(self) -> int:
        if not self.runs:
            raise IndexSpecError("empty index specification has no minimum")
        return min(min(run.start, run.last) for run in self.runs)

    def max(self) -> int:
        if not self.runs:
            raise IndexSpecError("empty index specification has no maximum")
        return max(max(run.start, run.last) for run in self.runs)

    def is_dense(self) -> bool:
        """True for a single ascending run with stride 1 (no gaps, no reordering)."""
        return len(self.runs) == 1 and self.runs[0].step == 1

    def is_trailing_run(self, width: int) -> bool:
        """
        True if the spec selects exactly the last ``size`` positions of a window
        of ``width`` columns, in order. The empty spec counts as a trailing run.
        """
        if not self.runs:
            return True
        return self.is_dense() and self.first() >= 0 and self.first() + self.size == width

    def text(self) -> str:
        return "[" + " ".join(run.text() for run in self.runs) + "]"

    def __repr__(self) -> str:
        return f"IndexSpec({self.text()})"
