"""Protection: an access matrix and a bounds-checked copy."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum


class AccessRight(IntEnum):
    NO_ACCESS = 0
    READ = 1
    WRITE = 2
    EXECUTE = 3


class AccessMatrix:
    """Rights of each subject (row) over each object (column)."""

    def __init__(self, rights: Iterable[Sequence[int]]) -> None:
        self._rows = tuple(tuple(AccessRight(r) for r in row) for row in rights)

    def right(self, subject: int, obj: int) -> AccessRight:
        if not 0 <= subject < len(self._rows):
            raise IndexError(f"no subject {subject}")
        row = self._rows[subject]
        if not 0 <= obj < len(row):
            raise IndexError(f"no object {obj}")
        return row[obj]

    def describe(self, subject: int, obj: int) -> str:
        return f"subject {subject} has {self.right(subject, obj).name} access to object {obj}"


def default_matrix() -> AccessMatrix:
    """The three-by-three matrix of the lab exercise."""
    r = AccessRight
    return AccessMatrix(
        [
            [r.READ, r.NO_ACCESS, r.EXECUTE],
            [r.WRITE, r.READ, r.NO_ACCESS],
            [r.EXECUTE, r.WRITE, r.READ],
        ]
    )


class BufferOverflowError(ValueError):
    """The source does not fit in the destination."""


def safe_copy(size: int, source: str) -> str:
    """Return ``source`` if it fits a buffer of ``size`` with its terminator."""
    if len(source) < size:
        return source
    raise BufferOverflowError("potential buffer overflow detected copy not performed")