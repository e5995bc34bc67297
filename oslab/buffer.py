"""A circular bounded buffer for the producer/consumer problem."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class BufferFullError(Exception):
    """The buffer has no room for another item."""


class BufferEmptyError(Exception):
    """The buffer holds nothing to consume."""


class BoundedBuffer(Generic[T]):
    """Ring buffer of ``size`` slots; one slot stays free, so it holds ``size - 1`` items."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("buffer size must be positive")
        self.size = size
        self._items: deque[T] = deque()

    @property
    def capacity(self) -> int:
        return self.size - 1

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def produce(self, value: T) -> None:
        if self.is_full():
            raise BufferFullError("Buffer is full")
        self._items.append(value)

    def consume(self) -> T:
        if self.is_empty():
            raise BufferEmptyError("Buffer is empty")
        return self._items.popleft()