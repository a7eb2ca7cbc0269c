"""An automatically resizing array of arbitrary values."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any

__all__ = ["ArrayList"]

EqualFunc = Callable[[Any, Any], Any]
CompareFunc = Callable[[Any, Any], int]


def _quicksort(data: list, compare: CompareFunc) -> None:
    """Sort ``data`` in place, taking the last item of each run as the pivot."""
    pending = [(0, len(data))]
    while pending:
        start, length = pending.pop()
        if length <= 1:
            continue
        end = start + length - 1
        pivot = data[end]
        boundary = start
        for i in range(start, end):
            if compare(data[i], pivot) < 0:
                data[i], data[boundary] = data[boundary], data[i]
                boundary += 1
        data[end] = data[boundary]
        data[boundary] = pivot
        pending.append((boundary + 1, end - boundary))
        pending.append((start, boundary - start))


class ArrayList:
    """An ordered sequence of values supporting insertion at any position."""

    def __init__(self, length: int = 0) -> None:
        """Create an empty list; ``length`` is a capacity hint, 0 for the default."""
        if length < 0:
            raise ValueError("length hint must not be negative")
        self._data: list[Any] = []

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``.

        Raises IndexError if ``index`` is beyond the end of the list.
        """
        if index < 0 or index > len(self._data):
            raise IndexError(f"insertion index {index} out of range")
        self._data.insert(index, value)

    def append(self, value: Any) -> None:
        """Add ``value`` to the end of the list."""
        self.insert(len(self._data), value)

    def prepend(self, value: Any) -> None:
        """Add ``value`` to the start of the list."""
        self.insert(0, value)

    def remove_range(self, index: int, length: int) -> None:
        """Remove ``length`` entries starting at ``index``.

        A range that does not lie wholly inside the list is ignored.
        """
        size = len(self._data)
        if index < 0 or length < 0 or index > size or index + length > size:
            return
        del self._data[index:index + length]

    def remove(self, index: int) -> None:
        """Remove the entry at ``index``; an invalid index is ignored."""
        self.remove_range(index, 1)

    def index_of(self, value: Any, equal: EqualFunc = operator.eq) -> int:
        """Return the position of the first entry ``equal`` to ``value``.

        Raises ValueError if no entry matches.
        """
        for position, item in enumerate(self._data):
            if equal(item, value):
                return position
        raise ValueError(f"{value!r} is not in the list")

    def clear(self) -> None:
        """Remove every entry."""
        self._data.clear()

    def sort(self, compare: CompareFunc) -> None:
        """Sort the entries in place using a three-way ``compare`` function."""
        _quicksort(self._data, compare)