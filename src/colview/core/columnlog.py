"""
Append-only column log with a suffix window.

The log keeps every descriptor a blueprint view has ever produced; ancestors
stay in place so the positions recorded by earlier transformations remain
meaningful. The logical columns of the view are the last ``width`` entries:

    logical i  ->  physical len(log) - width + i

All window arithmetic lives here so FrameView never indexes the arena directly.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .column import ColumnDescriptor
from .errors import IndexOutOfRange

__all__ = ["ColumnLog"]


class ColumnLog:
    """
    Arena of ColumnDescriptors plus the width of its trailing window.

    Notes:
        - Entries are never removed or replaced.
        - ``width`` may shrink freely but never exceeds ``len(log)``.
    """

    __slots__ = ("_entries", "_width")

    def __init__(self, columns: Iterable[ColumnDescriptor] = ()) -> None:
        self._entries: list[ColumnDescriptor] = list(columns)
        self._width = len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def width(self) -> int:
        return self._width

    @property
    def offset(self) -> int:
        """Physical position of logical column 0."""
        return len(self._entries) - self._width

    def set_width(self, width: int) -> None:
        if width < 0 or width > len(self._entries):
            raise ValueError(f"window width {width} outside [0, {len(self._entries)}]")
        self._width = width

    def append(self, column: ColumnDescriptor) -> None:
        self._entries.append(column)

    def logical(self, i: int) -> ColumnDescriptor:
        if i < 0 or i >= self._width:
            raise IndexOutOfRange(i, self._width)
        return self._entries[self.offset + i]

    def window(self) -> Iterator[ColumnDescriptor]:
        return iter(self._entries[self.offset :])

    def physical(self) -> tuple[ColumnDescriptor, ...]:
        return tuple(self._entries)

    def clone(self) -> ColumnLog:
        out = ColumnLog(c.clone() for c in self._entries)
        out._width = self._width
        return out
