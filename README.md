# algokit

A small collection of textbook algorithms working on simple records: a
number paired with a word. It provides ten sorting algorithms, a stack-based
depth-first search over a directed graph, and an unbalanced binary search
tree.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Records

`algokit.records.Record` is a frozen dataclass with two fields, `num` (an
integer) and `string` (a word). `str(record)` gives `"<num> <string>"`.

A record file holds whitespace-separated pairs of an integer and a word,
normally one pair per line:

```
42 apple
7 pear
19 plum
```

```python
from algokit.records import read_records, format_records

records = read_records("sort.txt")
print(format_records(records))
```

`read_records(path)` raises `ValueError` if a number does not parse or the
last number has no word after it. `format_records(records)` joins the records
one per line.

## Sorting

Every sorting function in `algokit.sorting` takes an iterable of records and
returns a new list ordered by `num`:

- `bubble_sort`, `insertion_sort`, `selection_sort`
- `shell_sort`, using the gap sequence given by `shell_gaps(n)`
  (Knuth's 1, 4, 13, ..., largest first)
- `merge_sort`, `quick_sort` (last element as pivot), `heap_sort`
- `counting_sort`, for keys from 0 to `COUNTING_LIMIT - 1` (0 to 99)
- `radix_sort`, for non-negative keys
- `bucket_sort(records, buckets=10)`, for non-negative keys; it spreads the
  records over the given number of buckets and quicksorts each one

`counting_sort`, `radix_sort` and `bucket_sort` raise `ValueError` for keys
they cannot handle, and `bucket_sort` also for fewer than one bucket.

```python
from algokit.records import read_records
from algokit.sorting import merge_sort, bucket_sort

records = read_records("sort.txt")
by_number = merge_sort(records)
also_by_number = bucket_sort(records, 10)
```

Bubble sort, insertion sort, merge sort, counting sort and radix sort keep
records with equal numbers in their original order; the others may not.

From the command line, name the algorithm and, optionally, the file
(default `sort.txt`):

```
algokit-sort merge sort.txt
algokit-sort bucket sort.txt --buckets 5
```

The algorithm is one of `bubble`, `bucket`, `counting`, `heap`, `insertion`,
`merge`, `quick`, `radix`, `selection`, `shell`. The command prints
`Sorted data:` followed by the sorted records, or `Error opening file!` and
exits with status 1 if the file cannot be opened.

## Depth-first search

`algokit.graph.Graph` holds named nodes and directed edges between them.

- `add_node(node_id, name)` adds a node; a duplicate id raises `ValueError`.
- `add_edge(src, dest)` adds a directed edge; an unknown id raises `KeyError`.
- `dfs(start_id)` returns an iterator that walks the graph with an explicit
  stack and yields each reachable node, as a `Record`, the first time it is
  reached. Neighbours are pushed in the order their nodes were added, so the
  one added last is explored first. An unknown start id raises `KeyError`.
- `nodes` lists the nodes in the order they were added; `len(graph)` counts
  them.

```python
from algokit.graph import Graph

graph = Graph()
graph.add_node(1, "A")
graph.add_node(2, "B")
graph.add_node(3, "C")
graph.add_edge(3, 1)
graph.add_edge(1, 2)

for node in graph.dfs(3):
    print(node)  # 3 C, then 1 A, then 2 B
```

A node file has a header line, then one `id name` line per node, then a line
starting with `Edges:` (`EDGES_MARKER`), then one `source destination` line
per edge. Lines that do not parse are skipped.

```
Nodes:
1 A
2 B
3 C
Edges:
3 1
1 2
```

`read_node_file(path)` returns the node records and the edge pairs;
`load_graph(path)` builds a `Graph` from them.

```
algokit-dfs node.txt --start 3
```

loads such a file (default `node.txt`) and prints the nodes in the order the
search visits them, starting from the given id (default 3).

## Binary search tree

`algokit.bst.BinarySearchTree` is an unbalanced tree of integer keys with
names; equal keys go to the right. It can be built from an iterable of
records.

```python
from algokit.bst import BinarySearchTree

tree = BinarySearchTree()
tree.insert(5, "five")
tree.insert(2, "two")
tree.insert(8, "eight")
tree.delete(5)   # True; False if the key is absent

print(len(tree))
for entry in tree:  # in order: smallest key first
    print(entry)
```

`load_tree(path)` builds a tree from the node section of a node file,
ignoring its edges.

```
algokit-bst node.txt
```

loads a tree (default `node.txt`), prints it in order, and then offers a menu:
`1` prints the tree, `2` inserts a node, `3` deletes one, and anything else,
or end of input, exits.

## What it does not do

The tree is not balanced and the graph is held only in memory; nothing is
saved back to a file. The command-line tools read their input files and
print to the terminal, and do no more.