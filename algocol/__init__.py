"""Classic data structures with pluggable comparison and hash functions."""

__version__ = "1.2.0"

__all__ = [
    "arraylist",
    "avl_tree",
    "binary_heap",
    "binomial_heap",
    "bloom_filter",
    "compare",
    "hash_table",
    "hashing",
]