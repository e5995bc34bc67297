"""Page replacement (FIFO and optimal) and paged address translation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ReplacementResult:
    """Outcome of a page replacement run.

    ``snapshots`` holds the frame contents after each reference, ``None``
    marking an empty frame. ``faults`` counts replacements plus the
    initial loading of every frame.
    """

    references: tuple[int, ...]
    frame_count: int
    snapshots: tuple[tuple[int | None, ...], ...]
    faults: int

    def fault_rate(self) -> float:
        """Page faults as a percentage of references."""
        if not self.references:
            raise ValueError("no references to rate")
        return self.faults / len(self.references) * 100


def _check_frames(frame_count: int) -> None:
    if frame_count < 1:
        raise ValueError("at least one frame is required")


def fifo_replacement(references: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page that was loaded earliest."""
    _check_frames(frame_count)
    refs = tuple(references)
    frames: list[int | None] = [None] * frame_count
    victim = 0
    replacements = 0
    snapshots = []
    for page in refs:
        if page not in frames:
            if None in frames:
                frames[frames.index(None)] = page
            else:
                frames[victim] = page
                victim = (victim + 1) % frame_count
                replacements += 1
        snapshots.append(tuple(frames))
    return ReplacementResult(refs, frame_count, tuple(snapshots), replacements + frame_count)


def optimal_replacement(references: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page whose next use lies furthest ahead, or is never used again."""
    _check_frames(frame_count)
    refs = tuple(references)
    frames: list[int | None] = [None] * frame_count
    replacements = 0
    snapshots = []
    for position, page in enumerate(refs):
        if page not in frames:
            if None in frames:
                frames[frames.index(None)] = page
            else:
                upcoming = refs[position + 1:]

                def distance(frame: int | None) -> int:
                    try:
                        return upcoming.index(frame) + 1
                    except ValueError:
                        return 0

                distances = [distance(frame) for frame in frames]
                if 0 in distances:
                    victim = distances.index(0)
                else:
                    victim = distances.index(max(distances))
                frames[victim] = page
                replacements += 1
        snapshots.append(tuple(frames))
    return ReplacementResult(refs, frame_count, tuple(snapshots), replacements + frame_count)


class MemoryFullError(Exception):
    """Not enough free pages for a process."""


class InvalidAddressError(ValueError):
    """A logical address names no loaded process, page or offset."""


class PagedMemory:
    """Physical memory split into pages, with one page table per process."""

    def __init__(self, memory_size: int, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError("page size must be positive")
        if memory_size < 0:
            raise ValueError("memory size must not be negative")
        self.memory_size = memory_size
        self.page_size = page_size
        self.pages_available = memory_size // page_size
        self._page_tables: list[tuple[int, ...]] = []

    @property
    def remaining_pages(self) -> int:
        return self.pages_available - sum(len(table) for table in self._page_tables)

    @property
    def process_count(self) -> int:
        return len(self._page_tables)

    def add_process(self, page_table: Iterable[int]) -> int:
        """Load a process given its page table; return its number, counting from 1."""
        table = tuple(page_table)
        if len(table) > self.remaining_pages:
            raise MemoryFullError(
                f"{len(table)} pages requested, {self.remaining_pages} remaining"
            )
        self._page_tables.append(table)
        return len(self._page_tables)

    def translate(self, process: int, page: int, offset: int) -> int:
        """Map a logical address to a physical one."""
        if not 1 <= process <= len(self._page_tables):
            raise InvalidAddressError(f"no process {process}")
        table = self._page_tables[process - 1]
        if not 0 <= page < len(table):
            raise InvalidAddressError(f"process {process} has no page {page}")
        if not 0 <= offset < self.page_size:
            raise InvalidAddressError(f"offset {offset} outside page")
        return table[page] * self.page_size + offset