"""Directed graphs of named nodes and a stack-based depth-first search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from os import PathLike

from algokit.records import Record

__all__ = ["EDGES_MARKER", "Graph", "read_node_file", "load_graph", "main"]

EDGES_MARKER = "Edges:"
"""Line prefix that separates the node section of a node file from its edges."""


class Graph:
    """Directed graph whose nodes carry an integer id and a name."""

    def __init__(self) -> None:
        self._nodes: list[Record] = []
        self._index: dict[int, int] = {}
        self._edges: list[set[int]] = []

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> list[Record]:
        """The nodes in the order they were added."""
        return list(self._nodes)

    def add_node(self, node_id: int, name: str) -> None:
        """Add a node; ids must be unique."""
        if node_id in self._index:
            raise ValueError(f"duplicate node id {node_id}")
        self._index[node_id] = len(self._nodes)
        self._nodes.append(Record(node_id, name))
        self._edges.append(set())

    def _position(self, node_id: int) -> int:
        try:
            return self._index[node_id]
        except KeyError:
            raise KeyError(f"unknown node id {node_id}") from None

    def add_edge(self, src: int, dest: int) -> None:
        """Add a directed edge from ``src`` to ``dest``."""
        self._edges[self._position(src)].add(self._position(dest))

    def dfs(self, start_id: int) -> Iterator[Record]:
        """Yield nodes reachable from ``start_id`` in stack-based DFS order.

        Neighbours are pushed in the order their nodes were added, so the
        one added last is explored first.
        """
        return self._walk(self._position(start_id))

    def _walk(self, start: int) -> Iterator[Record]:
        visited = [False] * len(self._nodes)
        stack = [start]
        while stack:
            node = stack.pop()
            if not visited[node]:
                visited[node] = True
                yield self._nodes[node]
            stack.extend(n for n in sorted(self._edges[node]) if not visited[n])


def _pairs(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    for line in lines:
        tokens = line.split()
        if len(tokens) < 2:
            continue
        try:
            yield int(tokens[0]), tokens[1]
        except ValueError:
            continue


def read_node_file(
    path: str | PathLike[str],
) -> tuple[list[Record], list[tuple[int, int]]]:
    """Read a node file: a header line, ``<id> <name>`` lines, then edges.

    The node section ends at a line starting with ``Edges:``; each following
    ``<src> <dest>`` line is an edge. Lines that do not parse are skipped.
    """
    nodes: list[Record] = []
    edges: list[tuple[int, int]] = []
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        node_lines = []
        for line in handle:
            if line.startswith(EDGES_MARKER):
                break
            node_lines.append(line)
        nodes = [Record(node_id, name) for node_id, name in _pairs(node_lines)]
        for src, dest in _pairs(handle):
            try:
                edges.append((src, int(dest)))
            except ValueError:
                continue
    return nodes, edges


def load_graph(path: str | PathLike[str]) -> Graph:
    """Build a :class:`Graph` from a node file."""
    nodes, edges = read_node_file(path)
    graph = Graph()
    for node in nodes:
        graph.add_node(node.num, node.string)
    for src, dest in edges:
        graph.add_edge(src, dest)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Load a graph from a node file and print its DFS order."""
    parser = argparse.ArgumentParser(description="Depth-first search over a node file.")
    parser.add_argument("path", nargs="?", default="node.txt")
    parser.add_argument("--start", type=int, default=3)
    args = parser.parse_args(argv)

    try:
        graph = load_graph(args.path)
    except OSError:
        print("Error opening file!")
        return 1
    except (KeyError, ValueError) as exc:
        print(f"error: {exc.args[0]}", file=sys.stderr)
        return 1

    try:
        order = graph.dfs(args.start)
    except KeyError as exc:
        print(f"error: {exc.args[0]}", file=sys.stderr)
        return 1

    print(f"Stack-Based DFS starting from node with ID {args.start}:")
    for node in order:
        print(f"Visited: {node.num} {node.string}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())