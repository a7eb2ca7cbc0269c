"""A hash table with separate chaining and pluggable hash and equality."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any, NamedTuple, Optional

__all__ = ["HashTablePair", "HashTable"]

HashFunc = Callable[[Any], int]
EqualFunc = Callable[[Any, Any], Any]
FreeFunc = Callable[[Any], Any]

_MASK = 0xFFFFFFFF

# Good hash table primes: each roughly double the previous one and as far
# as possible from the nearest powers of two.
_PRIMES = (
    193, 389, 769, 1543, 3079, 6151, 12289, 24593, 49157, 98317,
    196613, 393241, 786433, 1572869, 3145739, 6291469,
    12582917, 25165843, 50331653, 100663319, 201326611,
    402653189, 805306457, 1610612741,
)


class HashTablePair(NamedTuple):
    """A key and the value stored under it."""

    key: Any
    value: Any


class _Entry:
    __slots__ = ("key", "value")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value


class HashTable:
    """A mapping whose keys are hashed and compared by user functions.

    Each chain is kept as a list whose last element is the head of the
    chain, so new entries are found first and iteration walks each chain
    from head to tail.
    """

    def __init__(
        self, hash_func: HashFunc = hash, equal_func: EqualFunc = operator.eq
    ) -> None:
        self._hash_func = hash_func
        self._equal_func = equal_func
        self._key_free: Optional[FreeFunc] = None
        self._value_free: Optional[FreeFunc] = None
        self._entries = 0
        self._prime_index = 0
        self._table: list[list[_Entry]] = self._allocate_table()

    def _allocate_table(self) -> list[list[_Entry]]:
        if self._prime_index < len(_PRIMES):
            size = _PRIMES[self._prime_index]
        else:
            size = self._entries * 10
        return [[] for _ in range(size)]

    def _index(self, key: Any) -> int:
        return (self._hash_func(key) & _MASK) % len(self._table)

    def _free_entry(self, entry: _Entry) -> None:
        if self._key_free is not None:
            self._key_free(entry.key)
        if self._value_free is not None:
            self._value_free(entry.value)

    def _enlarge(self) -> None:
        old_table = self._table
        self._prime_index += 1
        self._table = self._allocate_table()
        for chain in old_table:
            for entry in reversed(chain):
                self._table[self._index(entry.key)].append(entry)

    def _find(self, key: Any) -> Optional[_Entry]:
        for entry in reversed(self._table[self._index(key)]):
            if self._equal_func(key, entry.key):
                return entry
        return None

    def __len__(self) -> int:
        return self._entries

    def __iter__(self) -> Iterator[HashTablePair]:
        """Yield every key-value pair, chain by chain."""
        for chain in self._table:
            for entry in reversed(chain):
                yield HashTablePair(entry.key, entry.value)

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={self._entries})"

    def register_free_functions(
        self, key_free: Optional[FreeFunc], value_free: Optional[FreeFunc]
    ) -> None:
        """Set functions called on keys and values when entries are dropped."""
        self._key_free = key_free
        self._value_free = value_free

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing entry."""
        if (self._entries * 3) // len(self._table) > 0:
            self._enlarge()

        chain = self._table[self._index(key)]
        for entry in reversed(chain):
            if self._equal_func(entry.key, key):
                if self._value_free is not None:
                    self._value_free(entry.value)
                if self._key_free is not None:
                    self._key_free(entry.key)
                entry.key = key
                entry.value = value
                return

        chain.append(_Entry(key, value))
        self._entries += 1

    def lookup(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default`` if absent."""
        entry = self._find(key)
        return default if entry is None else entry.value

    def remove(self, key: Any) -> bool:
        """Remove the entry for ``key``; return False if there was none."""
        chain = self._table[self._index(key)]
        for position in range(len(chain) - 1, -1, -1):
            entry = chain[position]
            if self._equal_func(key, entry.key):
                del chain[position]
                self._free_entry(entry)
                self._entries -= 1
                return True
        return False