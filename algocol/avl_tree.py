"""A balanced binary search tree mapping keys to values."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from typing import Any, Optional

__all__ = ["Side", "AVLTreeNode", "AVLTree", "subtree_height"]

CompareFunc = Callable[[Any, Any], int]


class Side(enum.IntEnum):
    """Which child of a node: left or right."""

    LEFT = 0
    RIGHT = 1


class AVLTreeNode:
    """A node holding one key and its value."""

    __slots__ = ("key", "value", "parent", "height", "children")

    def __init__(
        self, key: Any, value: Any, parent: Optional[AVLTreeNode] = None
    ) -> None:
        self.key = key
        self.value = value
        self.parent = parent
        self.height = 1
        self.children: list[Optional[AVLTreeNode]] = [None, None]

    def child(self, side: Side | int) -> Optional[AVLTreeNode]:
        """Return the child on ``side``, or None if absent or ``side`` is invalid."""
        try:
            side = Side(side)
        except ValueError:
            return None
        return self.children[side]

    @property
    def left(self) -> Optional[AVLTreeNode]:
        return self.children[Side.LEFT]

    @property
    def right(self) -> Optional[AVLTreeNode]:
        return self.children[Side.RIGHT]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, value={self.value!r})"


def subtree_height(node: Optional[AVLTreeNode]) -> int:
    """Return the height of the subtree rooted at ``node``; 0 for None."""
    return 0 if node is None else node.height


def _update_height(node: AVLTreeNode) -> None:
    node.height = max(subtree_height(node.children[0]),
                      subtree_height(node.children[1])) + 1


def _parent_side(node: AVLTreeNode) -> Side:
    assert node.parent is not None
    if node.parent.children[Side.LEFT] is node:
        return Side.LEFT
    return Side.RIGHT


class AVLTree:
    """An AVL tree ordered by a three-way ``compare`` function on keys."""

    def __init__(self, compare: CompareFunc) -> None:
        self._compare = compare
        self._root: Optional[AVLTreeNode] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in sorted order."""
        stack: list[AVLTreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.children[Side.LEFT]
            node = stack.pop()
            yield node.key
            node = node.children[Side.RIGHT]

    @property
    def root_node(self) -> Optional[AVLTreeNode]:
        """The root node, or None if the tree is empty."""
        return self._root

    def _replace(
        self, node1: AVLTreeNode, node2: Optional[AVLTreeNode]
    ) -> None:
        """Put ``node2`` in the place of ``node1`` under its parent."""
        if node2 is not None:
            node2.parent = node1.parent
        if node1.parent is None:
            self._root = node2
        else:
            parent = node1.parent
            parent.children[_parent_side(node1)] = node2
            _update_height(parent)

    def _rotate(self, node: AVLTreeNode, direction: Side) -> AVLTreeNode:
        other = 1 - direction
        new_root = node.children[other]
        assert new_root is not None
        self._replace(node, new_root)

        node.children[other] = new_root.children[direction]
        new_root.children[direction] = node
        node.parent = new_root
        moved = node.children[other]
        if moved is not None:
            moved.parent = node

        _update_height(node)
        _update_height(new_root)
        return new_root

    def _balance(self, node: AVLTreeNode) -> AVLTreeNode:
        left = node.children[Side.LEFT]
        right = node.children[Side.RIGHT]
        diff = subtree_height(right) - subtree_height(left)

        if diff >= 2:
            assert right is not None
            if subtree_height(right.children[Side.RIGHT]) < subtree_height(
                right.children[Side.LEFT]
            ):
                self._rotate(right, Side.RIGHT)
            node = self._rotate(node, Side.LEFT)
        elif diff <= -2:
            assert left is not None
            if subtree_height(left.children[Side.LEFT]) < subtree_height(
                left.children[Side.RIGHT]
            ):
                self._rotate(left, Side.LEFT)
            node = self._rotate(node, Side.RIGHT)

        _update_height(node)
        return node

    def _balance_to_root(self, node: Optional[AVLTreeNode]) -> None:
        while node is not None:
            node = self._balance(node).parent

    def insert(self, key: Any, value: Any = None) -> AVLTreeNode:
        """Add a key-value pair and return its new node.

        Equal keys are allowed; a later one is placed after earlier ones.
        """
        parent: Optional[AVLTreeNode] = None
        side = Side.LEFT
        rover = self._root
        while rover is not None:
            parent = rover
            side = Side.LEFT if self._compare(key, rover.key) < 0 else Side.RIGHT
            rover = rover.children[side]

        new_node = AVLTreeNode(key, value, parent)
        if parent is None:
            self._root = new_node
        else:
            parent.children[side] = new_node

        self._balance_to_root(parent)
        self._count += 1
        return new_node

    def _get_replacement(self, node: AVLTreeNode) -> Optional[AVLTreeNode]:
        """Unlink and return the nearest node to ``node`` from its taller side."""
        left = node.children[Side.LEFT]
        right = node.children[Side.RIGHT]
        if left is None and right is None:
            return None

        side = (
            Side.RIGHT
            if subtree_height(left) < subtree_height(right)
            else Side.LEFT
        )
        inner = 1 - side
        result = node.children[side]
        assert result is not None
        while result.children[inner] is not None:
            result = result.children[inner]

        self._replace(result, result.children[side])
        assert result.parent is not None
        _update_height(result.parent)
        return result

    def remove_node(self, node: AVLTreeNode) -> None:
        """Remove ``node``, which must belong to this tree."""
        swap = self._get_replacement(node)

        if swap is None:
            self._replace(node, None)
            start = node.parent
        else:
            start = swap if swap.parent is node else swap.parent
            for i in (Side.LEFT, Side.RIGHT):
                child = node.children[i]
                swap.children[i] = child
                if child is not None:
                    child.parent = swap
            swap.height = node.height
            self._replace(node, swap)

        node.parent = None
        node.children = [None, None]
        self._count -= 1
        self._balance_to_root(start)

    def remove(self, key: Any) -> bool:
        """Remove one entry with ``key``; return False if none was found."""
        node = self.lookup_node(key)
        if node is None:
            return False
        self.remove_node(node)
        return True

    def lookup_node(self, key: Any) -> Optional[AVLTreeNode]:
        """Return a node whose key compares equal to ``key``, or None."""
        node = self._root
        while node is not None:
            diff = self._compare(key, node.key)
            if diff == 0:
                return node
            node = node.children[Side.LEFT if diff < 0 else Side.RIGHT]
        return None

    def lookup(self, key: Any) -> Any:
        """Return the value stored under ``key``; raise KeyError if absent."""
        node = self.lookup_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def to_list(self) -> list[Any]:
        """Return all keys in sorted order."""
        return list(self)