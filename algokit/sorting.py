"""Classic sorting algorithms over records keyed by their ``num`` field.

Every function takes an iterable of records and returns a new sorted list.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from functools import partial

from algokit.records import Record, format_records, read_records

__all__ = [
    "COUNTING_LIMIT",
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "shell_gaps",
    "shell_sort",
    "merge_sort",
    "quick_sort",
    "heap_sort",
    "counting_sort",
    "radix_sort",
    "bucket_sort",
    "main",
]

COUNTING_LIMIT = 100
"""Keys handled by :func:`counting_sort` must lie in ``range(COUNTING_LIMIT)``."""


def bubble_sort(records: Iterable[Record]) -> list[Record]:
    """Stable bubble sort."""
    items = list(records)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j].num > items[j + 1].num:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(records: Iterable[Record]) -> list[Record]:
    """Stable insertion sort."""
    items = list(records)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j].num > key.num:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(records: Iterable[Record]) -> list[Record]:
    """Selection sort; swaps each position with the first minimum after it."""
    items = list(records)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=lambda k: items[k].num)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def shell_gaps(n: int) -> list[int]:
    """Knuth's gap sequence (1, 4, 13, ...) for ``n`` items, largest first."""
    k = 1
    while 3 * k + 1 < n:
        k = 3 * k + 1
    gaps = []
    while k > 0:
        gaps.append(k)
        k //= 3
    return gaps


def shell_sort(records: Iterable[Record]) -> list[Record]:
    """Shell sort using :func:`shell_gaps`."""
    items = list(records)
    for gap in shell_gaps(len(items)):
        for i in range(gap, len(items)):
            current = items[i]
            j = i
            while j >= gap and items[j - gap].num > current.num:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
    return items


def _merge(left: Sequence[Record], right: Sequence[Record]) -> list[Record]:
    merged: list[Record] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i].num <= right[j].num:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(records: Iterable[Record]) -> list[Record]:
    """Stable top-down merge sort."""
    items = list(records)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Record], low: int, high: int) -> int:
    pivot = items[high].num
    i = low
    for j in range(low, high):
        if items[j].num <= pivot:
            items[i], items[j] = items[j], items[i]
            i += 1
    items[i], items[high] = items[high], items[i]
    return i


def quick_sort(records: Iterable[Record]) -> list[Record]:
    """Quicksort with the last element of each range as pivot."""
    items = list(records)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high or low < 0:
            continue
        p = _partition(items, low, high)
        pending.append((p + 1, high))
        pending.append((low, p - 1))
    return items


def _sift_down(items: list[Record], root: int, end: int) -> None:
    while 2 * root + 1 < end:
        child = 2 * root + 1
        if child + 1 < end and items[child].num < items[child + 1].num:
            child += 1
        if items[root].num >= items[child].num:
            return
        items[root], items[child] = items[child], items[root]
        root = child


def heap_sort(records: Iterable[Record]) -> list[Record]:
    """Heap sort over a max-heap."""
    items = list(records)
    size = len(items)
    for start in range((size - 2) // 2, -1, -1):
        _sift_down(items, start, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def counting_sort(records: Iterable[Record]) -> list[Record]:
    """Stable counting sort for keys in ``range(COUNTING_LIMIT)``."""
    items = list(records)
    slots: list[list[Record]] = [[] for _ in range(COUNTING_LIMIT)]
    for record in items:
        if not 0 <= record.num < COUNTING_LIMIT:
            raise ValueError(
                f"counting sort needs keys in 0..{COUNTING_LIMIT - 1}, got {record.num}"
            )
        slots[record.num].append(record)
    return [record for slot in slots for record in slot]


def radix_sort(records: Iterable[Record]) -> list[Record]:
    """Stable least-significant-digit radix sort for non-negative keys."""
    items = list(records)
    if not items:
        return items
    if any(record.num < 0 for record in items):
        raise ValueError("radix sort needs non-negative keys")
    largest = max(record.num for record in items)
    exp = 1
    while largest // exp > 0:
        digits: list[list[Record]] = [[] for _ in range(10)]
        for record in items:
            digits[(record.num // exp) % 10].append(record)
        items = [record for digit in digits for record in digit]
        exp *= 10
    return items


def bucket_sort(records: Iterable[Record], buckets: int = 10) -> list[Record]:
    """Bucket sort for non-negative keys; each bucket is quicksorted."""
    if buckets < 1:
        raise ValueError("bucket sort needs at least one bucket")
    items = list(records)
    if not items:
        return items
    if any(record.num < 0 for record in items):
        raise ValueError("bucket sort needs non-negative keys")
    largest = max(record.num for record in items)
    groups: list[list[Record]] = [[] for _ in range(buckets)]
    for record in items:
        index = min(buckets * record.num // (largest + 1), buckets - 1)
        groups[index].append(record)
    return [record for group in groups for record in quick_sort(group)]


_ALGORITHMS: dict[str, Callable[..., list[Record]]] = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "shell": shell_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
    "counting": counting_sort,
    "radix": radix_sort,
    "bucket": bucket_sort,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the records of a file with the chosen algorithm and print them."""
    parser = argparse.ArgumentParser(description="Sort '<number> <word>' records.")
    parser.add_argument("algorithm", choices=sorted(_ALGORITHMS))
    parser.add_argument("path", nargs="?", default="sort.txt")
    parser.add_argument("--buckets", type=int, default=10)
    args = parser.parse_args(argv)

    try:
        records = read_records(args.path)
    except OSError:
        print("Error opening file!")
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sorter = _ALGORITHMS[args.algorithm]
    if sorter is bucket_sort:
        sorter = partial(bucket_sort, buckets=args.buckets)
    try:
        result = sorter(records)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("Sorted data:")
    text = format_records(result)
    if text:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())