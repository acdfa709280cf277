"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "bitset",
    "dictionary",
    "hash_string",
    "heap",
    "kmp",
    "lca",
    "lcs",
    "linked_list",
    "max_subarray",
    "prime_decompose",
    "priority_queue",
    "sha1",
    "sorting",
    "trie",
]