# dsakit

Classic algorithms and data structures with a small, plain-Python API.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `dsakit.linked_lists`: `ListNode` (iterable over the values from that node
  on), `build_list`, `get_intersection_node`, `get_middle`, `is_palindrome`.
- `dsakit.strings`: `smallest_string`, `distinct_subsequences` (modulo
  1e9+7, the empty subsequence included), `number_search`,
  `longest_common_subsequence`, `reverse_words`.
- `dsakit.arrays`: `boolean_matrix` (returns a new matrix),
  `shortest_subarray_with_sum`, `min_size_subarray`, `unique_elements`,
  `binary_search`, `num_identical_pairs`.
- `dsakit.trees`: `TreeNode`, `spiral_traversal`, `vertical_traversal`.
- `dsakit.graphs`: `Graph` (a directed graph on vertices `0 .. n-1`, with
  `add_edge` and `bfs`) and `articulation_points` (an undirected graph on
  vertices `1 .. n`).
- `dsakit.bplus`: `BPlusTree` with `insert`, `search`, `in` and `walk`.
- `dsakit.conversions`: `binary_to_decimal`, `decimal_to_binary` and the
  `main` function behind the command below.

Functions raise `ValueError` on input they cannot handle, such as an empty
list for `get_middle` or negative numbers for the conversions.

## Examples

```python
from dsakit.linked_lists import build_list, get_middle, is_palindrome
from dsakit.strings import longest_common_subsequence
from dsakit.graphs import Graph, articulation_points
from dsakit.bplus import BPlusTree

head = build_list([1, 2, 3, 2, 1])
is_palindrome(head)                      # True
get_middle(build_list([1, 2, 3, 4, 5]))  # 3

longest_common_subsequence("abcde", "ace")  # 3

g = Graph(4)
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.bfs(2)                                 # [2, 0, 3, 1]

articulation_points(5, [(1, 2), (1, 3), (3, 2), (1, 4), (4, 5)])  # [1, 4]

tree = BPlusTree(3)
for key in (5, 3, 8, 1, 9):
    tree.insert(key)
5 in tree                                # True
7 in tree                                # False
```

## Command line

A binary/decimal converter is installed as a command:

```
dsakit-convert
```

It asks for a choice (1 reads a number written in binary digits and prints
its decimal value, 2 prints a decimal number in binary) and then for the
number to convert. Answers can also be given as arguments, which are used
before anything is read from standard input:

```
dsakit-convert 2 10
```