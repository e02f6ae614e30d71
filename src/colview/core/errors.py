"""
Core exception types raised by frame views, index specifications, and selection.

Provides typed exceptions for core-domain failures:
- IndexOutOfRange for logical column indices outside [0, column_count).
- InvalidUnwrap when a blueprint view is asked for its materialized table.
- OwnershipViolation when an in-place operation is attempted on a shared view.
- IndexSpecError for malformed index specifications.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Each error also subclasses the closest builtin so callers that only know
      about IndexError/ValueError keep working.
    - OwnershipViolation signals a broken caller contract, not a recoverable
      condition; it subclasses AssertionError for that reason.

Examples:
    Catch an out-of-range selection.

    >>> from colview.core.errors import IndexOutOfRange
    >>> try:
    ...     raise IndexOutOfRange(7, 3)
    ... except IndexError as e:
    ...     msg = str(e)
    >>> "out of bounds" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "FrameError",
    "IndexOutOfRange",
    "InvalidUnwrap",
    "OwnershipViolation",
    "IndexSpecError",
]


class FrameError(Exception):
    """Base class for colview core failures."""


class IndexOutOfRange(FrameError, IndexError):
    """
    Logical column index outside [0, bound).

    Attributes:
        index (int): Offending index as requested by the caller.
        bound (int): Number of logical columns of the receiver.
    """

    def __init__(self, index: int, bound: int) -> None:
        self.index = index
        self.bound = bound
        super().__init__(f"Column index {index} is out of bounds for a frame with {bound} columns")


class InvalidUnwrap(FrameError, RuntimeError):
    """Attempt to unwrap the materialized table of a blueprint-mode view."""


class OwnershipViolation(FrameError, AssertionError):
    """In-place mutation requested on a view that is not exclusively owned."""


class IndexSpecError(FrameError, ValueError):
    """Malformed index specification (bad text, open-ended slice, non-integer entry)."""
