"""An unbalanced binary search tree of named integer keys."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from os import PathLike

from algokit.graph import read_node_file
from algokit.records import Record, format_records

__all__ = ["BinarySearchTree", "load_tree", "main"]


@dataclass
class _Node:
    key: int
    name: str
    left: _Node | None = None
    right: _Node | None = None


def _delete(node: _Node | None, key: int) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
        return node, removed
    if key > node.key:
        node.right, removed = _delete(node.right, key)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.key, node.name = successor.key, successor.name
    node.right, _ = _delete(node.right, successor.key)
    return node, True


class BinarySearchTree:
    """Binary search tree; equal keys go to the right subtree."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for record in records:
            self.insert(record.num, record.string)

    def insert(self, key: int, name: str) -> None:
        """Insert ``key`` with its ``name``."""
        new = _Node(key, name)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def delete(self, key: int) -> bool:
        """Remove one node holding ``key``; return whether one was found."""
        self._root, removed = _delete(self._root, key)
        if removed:
            self._size -= 1
        return removed

    def __iter__(self) -> Iterator[Record]:
        """Yield the entries in key order (inorder traversal)."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield Record(node.key, node.name)
            node = node.right

    def __len__(self) -> int:
        return self._size


def load_tree(path: str | PathLike[str]) -> BinarySearchTree:
    """Build a tree from the node section of a node file."""
    nodes, _ = read_node_file(path)
    return BinarySearchTree(nodes)


_MENU = (
    "You can choose the following\n"
    "1:Print the Tree\n"
    "2:Insert a node\n"
    "3:delete a node\n"
    "else:exit\n"
)


def _read_token(prompt: str) -> str | None:
    try:
        line = input(prompt)
    except EOFError:
        return None
    tokens = line.split()
    return tokens[0] if tokens else None


def _read_int(prompt: str) -> int | None:
    token = _read_token(prompt)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _print_tree(tree: BinarySearchTree) -> None:
    text = format_records(tree)
    if text:
        print(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Load a tree from a node file, print it, then edit it interactively."""
    parser = argparse.ArgumentParser(description="Interactive binary search tree.")
    parser.add_argument("path", nargs="?", default="node.txt")
    args = parser.parse_args(argv)

    try:
        tree = load_tree(args.path)
    except OSError:
        print("Error opening file!")
        return 1

    print("Binary search tree (inorder traversal):")
    _print_tree(tree)
    while True:
        print(_MENU, end="")
        choice = _read_int("selection:")
        if choice == 1:
            _print_tree(tree)
        elif choice == 2:
            key = _read_int("Give me the new id you want to insert:")
            name = _read_token("\nGive me a string:") if key is not None else None
            if key is None or name is None:
                print("Invalid input.")
                continue
            tree.insert(key, name)
        elif choice == 3:
            key = _read_int("\nGive me the id for the node you want to delete:")
            if key is None:
                print("Invalid input.")
                continue
            tree.delete(key)
        else:
            break
    return 0


if __name__ == "__main__":
    raise SystemExit(main())