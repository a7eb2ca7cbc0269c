"""A binary heap ordered by a user-supplied comparison function."""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any

__all__ = ["HeapType", "BinaryHeap"]

CompareFunc = Callable[[Any, Any], int]


class HeapType(enum.Enum):
    """Whether the lowest or the greatest value comes out first."""

    MIN = 0
    MAX = 1


class BinaryHeap:
    """A priority queue stored as an implicit binary tree in a list."""

    def __init__(self, heap_type: HeapType, compare: CompareFunc) -> None:
        self._heap_type = HeapType(heap_type)
        self._compare = compare
        self._values: list[Any] = []

    def __len__(self) -> int:
        return len(self._values)

    @property
    def heap_type(self) -> HeapType:
        return self._heap_type

    def _cmp(self, a: Any, b: Any) -> int:
        if self._heap_type is HeapType.MIN:
            return self._compare(a, b)
        return -self._compare(a, b)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        values = self._values
        values.append(value)
        index = len(values) - 1
        while index > 0:
            parent = (index - 1) // 2
            if self._cmp(values[parent], value) < 0:
                break
            values[index] = values[parent]
            index = parent
        values[index] = value

    def pop(self) -> Any:
        """Remove and return the first value; raise IndexError if empty."""
        values = self._values
        if not values:
            raise IndexError("pop from an empty heap")
        result = values[0]
        new_value = values.pop()
        if not values:
            return result

        count = len(values)
        index = 0
        while True:
            child1 = index * 2 + 1
            child2 = index * 2 + 2
            if child1 < count and self._cmp(new_value, values[child1]) > 0:
                if child2 < count and self._cmp(values[child1], values[child2]) > 0:
                    next_index = child2
                else:
                    next_index = child1
            elif child2 < count and self._cmp(new_value, values[child2]) > 0:
                next_index = child2
            else:
                values[index] = new_value
                break
            values[index] = values[next_index]
            index = next_index
        return result