"""Records of an integer key and a word, and the text format they are stored in."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

__all__ = ["Record", "read_records", "format_records"]


@dataclass(frozen=True)
class Record:
    """A single entry: the integer it is sorted by and the word it carries."""

    num: int
    string: str

    def __str__(self) -> str:
        return f"{self.num} {self.string}"


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def read_records(path: str | PathLike[str]) -> list[Record]:
    """Read whitespace-separated ``<number> <word>`` pairs from a file."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    if len(tokens) % 2:
        raise ValueError(f"record without a word after {tokens[-1]!r}")
    return [
        Record(_parse_int(num), string)
        for num, string in zip(tokens[::2], tokens[1::2])
    ]


def format_records(records: Iterable[Record]) -> str:
    """Render records one per line as ``<number> <word>``."""
    return "\n".join(str(record) for record in records)