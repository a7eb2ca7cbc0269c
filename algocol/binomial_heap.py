"""A binomial heap ordered by a user-supplied comparison function."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Optional

from algocol.binary_heap import HeapType

__all__ = ["HeapType", "BinomialHeap"]

CompareFunc = Callable[[Any, Any], int]


class _BinomialTree:
    """A heap-ordered binomial tree; its order is the number of subtrees."""

    __slots__ = ("value", "subtrees")

    def __init__(self, value: Any, subtrees: list[_BinomialTree]) -> None:
        self.value = value
        self.subtrees = subtrees

    @property
    def order(self) -> int:
        return len(self.subtrees)


class BinomialHeap:
    """A priority queue built from a forest of binomial trees."""

    def __init__(self, heap_type: HeapType, compare: CompareFunc) -> None:
        self._heap_type = HeapType(heap_type)
        self._compare = compare
        self._roots: list[Optional[_BinomialTree]] = []
        self._count = 0

    def __len__(self) -> int:
        return self._count

    @property
    def heap_type(self) -> HeapType:
        return self._heap_type

    def _cmp(self, a: Any, b: Any) -> int:
        if self._heap_type is HeapType.MIN:
            return self._compare(a, b)
        return -self._compare(a, b)

    def _merge_trees(
        self, tree1: _BinomialTree, tree2: _BinomialTree
    ) -> _BinomialTree:
        """Join two trees of equal order; the smaller root becomes the new root."""
        if self._cmp(tree1.value, tree2.value) > 0:
            tree1, tree2 = tree2, tree1
        return _BinomialTree(tree1.value, [*tree1.subtrees, tree2])

    def _merge(self, other_roots: Sequence[Optional[_BinomialTree]]) -> None:
        """Merge another forest into this heap, like a ripple-carry adder."""
        roots = self._roots
        size = max(len(roots), len(other_roots)) + 1
        new_roots: list[Optional[_BinomialTree]] = []
        carry: Optional[_BinomialTree] = None

        for i in range(size):
            vals: list[_BinomialTree] = []
            if i < len(roots) and roots[i] is not None:
                vals.append(roots[i])
            if i < len(other_roots) and other_roots[i] is not None:
                vals.append(other_roots[i])
            if carry is not None:
                vals.append(carry)

            new_roots.append(vals[-1] if len(vals) & 1 else None)
            carry = self._merge_trees(vals[0], vals[1]) if len(vals) & 2 else None

        while new_roots and new_roots[-1] is None:
            new_roots.pop()
        self._roots = new_roots

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._merge([_BinomialTree(value, [])])
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the first value; raise IndexError if empty."""
        if self._count == 0:
            raise IndexError("pop from an empty heap")

        least_index: Optional[int] = None
        for index, tree in enumerate(self._roots):
            if tree is None:
                continue
            if least_index is None or self._cmp(
                tree.value, self._roots[least_index].value
            ) < 0:
                least_index = index

        assert least_index is not None
        least_tree = self._roots[least_index]
        self._roots[least_index] = None
        self._merge(least_tree.subtrees)
        self._count -= 1
        return least_tree.value