# algocol

Classic in-memory data structures that take their ordering, equality and
hashing from functions you pass in. The package also has ready-made functions
for integers, strings and object identity. It is pure Python and has no
dependencies.

## Installation

```
pip install algocol
```

To run the test suite:

```
pip install "algocol[test]"
pytest
```

## Modules

| Module                  | Contents |
|-------------------------|----------|
| `algocol.compare`       | `int_compare`, `int_equal`, `pointer_compare`, `pointer_equal`, `string_compare`, `string_equal`, `string_nocase_compare`, `string_nocase_equal` |
| `algocol.hashing`       | `int_hash`, `pointer_hash`, `string_hash`, `string_nocase_hash` |
| `algocol.arraylist`     | `ArrayList`: an ordered sequence with insertion at any position, range removal, search and sort |
| `algocol.binary_heap`   | `HeapType`, `BinaryHeap`: a list-backed min or max heap |
| `algocol.binomial_heap` | `BinomialHeap`: a min or max heap built from binomial trees (it re-exports `HeapType`) |
| `algocol.avl_tree`      | `AVLTree`, `AVLTreeNode`, `Side`, `subtree_height`: a balanced binary search tree |
| `algocol.hash_table`    | `HashTable`, `HashTablePair`: a separately chained hash table |
| `algocol.bloom_filter`  | `BloomFilter`, `MAX_FUNCTIONS`: probabilistic set membership |

### Comparison and hash functions

- Ordering functions (`*_compare`) return `-1`, `0` or `1`. Equality functions
  (`*_equal`) return a `bool`.
- `pointer_equal` tests identity (`a is b`); `pointer_compare` orders objects
  by `id()`.
- `string_nocase_compare` and `string_nocase_equal` ignore the case of ASCII
  letters only.
- Hash functions return unsigned 32-bit integers. `int_hash` reduces the
  integer modulo 2**32, `pointer_hash` hashes `id()`, and `string_hash` is
  djb2 over the UTF-8 bytes of a `str` (or over `bytes` as given).
  `string_nocase_hash` lower-cases ASCII letters first.

## Examples

### Heaps

```python
from algocol.binary_heap import BinaryHeap, HeapType
from algocol.compare import int_compare

heap = BinaryHeap(HeapType.MIN, int_compare)
for n in (5, 1, 4, 2, 3):
    heap.insert(n)

print([heap.pop() for _ in range(len(heap))])  # [1, 2, 3, 4, 5]
```

`BinomialHeap` takes the same arguments and has the same `insert`, `pop` and
`len()`. With `HeapType.MAX` the greatest value comes out first. `pop` on an
empty heap raises `IndexError`.

### AVL tree

```python
from algocol.avl_tree import AVLTree
from algocol.compare import int_compare

tree = AVLTree(int_compare)
for key in (89, 23, 42, 4, 16):
    tree.insert(key, str(key))

print(tree.lookup(42))   # '42'
print(tree.to_list())    # [4, 16, 23, 42, 89]
print(tree.remove(23))   # True
print(len(tree))         # 4
```

- `insert` returns the new `AVLTreeNode`; equal keys are allowed and each gets
  its own node.
- `lookup` raises `KeyError` for a missing key; `lookup_node` returns `None`.
- `remove` returns `False` if the key is absent; `remove_node` removes a given
  node.
- Iterating over the tree yields keys in sorted order.
- `tree.root_node` gives the root. Each node has `key`, `value`, `parent`,
  `height`, `left`, `right` and `child(Side.LEFT | Side.RIGHT)`; `child`
  returns `None` for an invalid side. `subtree_height(node)` is `0` for `None`.

### Hash table

```python
from algocol.hash_table import HashTable
from algocol.hashing import string_hash
from algocol.compare import string_equal

table = HashTable(string_hash, string_equal)
table.insert("apple", 1)
table.insert("pear", 2)

print(table["apple"])              # 1
print("plum" in table)             # False
print(table.lookup("plum", None))  # None
print(table.remove("pear"))        # True
for pair in table:
    print(pair.key, pair.value)
```

- `hash_func` and `equal_func` default to the built-in `hash` and `==`.
- Inserting an existing key replaces its key and value.
- `table[key]` raises `KeyError` for a missing key; `lookup` returns the
  default instead.
- `register_free_functions(key_free, value_free)` sets callables that receive
  the old key and value whenever an entry is replaced or removed.
- Iteration yields `HashTablePair(key, value)` named tuples, in table order.

### Bloom filter

```python
from algocol.bloom_filter import BloomFilter
from algocol.hashing import string_hash

seen = BloomFilter(1024, string_hash, 4)
seen.insert("hello")

print("hello" in seen)   # True
print(seen.query("world"))  # False unless there is a false positive

snapshot = seen.read()   # bytes, (table_size + 7) // 8 long
copy = BloomFilter(1024, string_hash, 4)
copy.load(snapshot)
```

- `num_functions` may be at most `MAX_FUNCTIONS` (64); `table_size` must be
  at least 1. Otherwise the constructor raises `ValueError`.
- `load` raises `ValueError` if the data is not exactly the table's length.
- `union` (also `|`) and `intersection` (also `&`) return a new filter; both
  filters must share table size, hash function and number of functions, or
  `ValueError` is raised.

### Array list

```python
from algocol.arraylist import ArrayList
from algocol.compare import int_compare, int_equal

items = ArrayList(0)
for n in (3, 1, 2):
    items.append(n)
items.prepend(0)
items.sort(int_compare)

print(list(items))                    # [0, 1, 2, 3]
print(items[1])                       # 1
print(items.index_of(2, int_equal))   # 2
items.remove_range(1, 2)
print(list(items))                    # [0, 3]
```

- The constructor's argument is a capacity hint; it must not be negative.
- `insert(index, value)` raises `IndexError` if `index` is past the end.
- `remove` and `remove_range` silently ignore a range that does not lie
  wholly inside the list.
- `index_of` raises `ValueError` if no entry matches; `equal` defaults to `==`.
- `sort` takes a three-way comparison function.

## What it does not do

Everything lives in memory: there is no storage layer (a Bloom filter's bit
table can be saved with `read` and restored with `load`, nothing else), no
command-line tool, and no locking, so a structure shared between threads needs
your own synchronisation.