"""Sorting algorithms, depth-first graph search and a binary search tree over numbered records."""

__version__ = "0.1.0"
__all__ = ["records", "sorting", "graph", "bst"]