# algokit

A collection of classic algorithms and data structures in plain Python, with
no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `merge_sort` (in place), `radix_sort` (unsigned 32-bit values), `check_order` |
| `algokit.max_subarray` | `max_subarray`: Kadane's maximum contiguous subarray, returned as an inclusive `(begin, end)` range |
| `algokit.kmp` | `kmp_table`, `kmp_search`: Knuth–Morris–Pratt search |
| `algokit.lcs` | `lcs_length`, `lcs_backtrack`: longest common subsequence |
| `algokit.hash_string` | `hash_string` (the 31-multiplier string hash), `hash_fnv1a` (32-bit FNV-1a) |
| `algokit.bitset` | `BitSet`: fixed-size set of bits; out-of-range positions are ignored |
| `algokit.trie` | `Trie`: prefix tree over the letters a–z counting words and prefixes |
| `algokit.avl` | `AVLTree`: self-balancing binary search tree with GraphViz export |
| `algokit.heap` | `Heap`, `HeapItem`: bounded binary min-heap keyed by integers |
| `algokit.priority_queue` | `PriorityQueue`: queue kept in ascending priority order |
| `algokit.lca` | `LCA`: lowest common ancestor by binary lifting |
| `algokit.sha1` | `SHA1`, `sha1`: SHA-1 message digest |
| `algokit.dictionary` | `Dictionary`, `KeyValuePair`, `get_next_prime`: bucketed hash table with a free list |
| `algokit.linked_list` | `LinkedList`, `ListNode`: circular doubly linked list with O(1) moves between lists |
| `algokit.prime_decompose` | `is_prime`, `next_prime`, `decompose`: primality testing and factorisation of 64-bit integers |

## Examples

Sorting works in place on a list:

```python
from algokit.sorting import merge_sort, insertion_sort, radix_sort

data = [5, 3, 9, 1, 7]
merge_sort(data, 0, len(data) - 1)   # bounds are inclusive
insertion_sort(data)
radix_sort(data)                     # values must be in 0 <= v < 2**32
```

String search returns the position of the first match, or -1:

```python
from algokit.kmp import kmp_search

kmp_search("ABC ABCDAB ABCDABCDABDE", "ABCDABD")   # 15
```

Longest common subsequence:

```python
from algokit.lcs import lcs_length, lcs_backtrack

x, y = "XMJYAUZ", "MZJAWXU"
table = lcs_length(x, y)
"".join(lcs_backtrack(table, x, y))   # 'MJAU'
```

Counting words and prefixes with a trie (case-insensitive; letters a–z only,
anything else raises `ValueError`):

```python
from algokit.trie import Trie

trie = Trie()
trie.add("hello")
trie.add("help")
trie.count("hello")        # 1
trie.count_prefix("hel")   # 2: added words longer than and starting with "hel"
```

A balanced tree that keeps duplicates:

```python
from algokit.avl import AVLTree

tree = AVLTree()
for value in (10, 20, 30, 40, 50):
    tree.insert(value)
30 in tree        # True
tree.erase(30)
len(tree), tree.height()
```

A bounded min-heap; pushing onto a full heap is ignored:

```python
from algokit.heap import Heap

heap = Heap(10)
heap.push(5, "e")
heap.push(1, "a")
heap.pop()        # HeapItem(key=1, data='a')
```

A priority queue; among equal priorities the most recently queued value
comes first:

```python
from algokit.priority_queue import PriorityQueue

pq = PriorityQueue()
pq.queue("low", 1)
pq.queue("high", 9)
pq.top()          # ('low', 1)
pq.dequeue()
```

Lowest common ancestor in a tree rooted at node 0:

```python
from algokit.lca import LCA

lca = LCA([(0, 1), (1, 2), (2, 3), (1, 4)])
lca.query(3, 4)   # 1
```

Hashing:

```python
from algokit.sha1 import SHA1
from algokit.hash_string import hash_fnv1a

SHA1(b"abc").hexdigest()  # 'a9993e364706816aba3e25717850c26c9cd0d89d'
hash_fnv1a("hello")
```

A hash table:

```python
from algokit.dictionary import Dictionary

table = Dictionary(16)
table["apple"] = 1
table.add("pear", 2)      # False if the key is already present
table.get("plum", 0)      # 0
table.remove("apple")
[pair.key for pair in table]
```

A doubly linked list whose nodes can be moved or removed:

```python
from algokit.linked_list import LinkedList

items = LinkedList()
first = items.push_back("a")
items.push_back("b")
items.move_to_back(first)
list(items)               # ['b', 'a']
```

Prime factorisation:

```python
from algokit.prime_decompose import decompose, is_prime

decompose(2**32 - 1)      # [3, 5, 17, 257, 65537]
is_prime(2**61 - 1)       # True
```

## Command line

`algokit-prime-decompose` prints the prime factorisation of the Mersenne
numbers 2^p - 1 for p from 1 to 63, one per line:

```
algokit-prime-decompose
```

## What it does not do

There is no red-black tree or interval tree in this package; for ordered
storage it offers only `AVLTree`, which has no range or overlap search.