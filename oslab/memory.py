"""Contiguous memory allocation with fixed (MFT) and variable (MVT) partitions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class MftAllocation:
    """One process's request under fixed partitioning; processes count from 1."""

    process: int
    required: int
    allocated: bool
    internal_fragmentation: int | None


@dataclass(frozen=True)
class MftResult:
    block_count: int
    external_fragmentation: int
    allocations: tuple[MftAllocation, ...]
    memory_full: bool

    @property
    def total_internal_fragmentation(self) -> int:
        return sum(a.internal_fragmentation or 0 for a in self.allocations)


def allocate_fixed(total_memory: int, block_size: int, requests: Iterable[int]) -> MftResult:
    """Place each request in a block of its own until the blocks run out."""
    if block_size <= 0:
        raise ValueError("block size must be positive")
    block_count = total_memory // block_size
    external = total_memory - block_count * block_size
    pending = list(requests)
    allocations = []
    used = 0
    for number, required in enumerate(pending, start=1):
        if used >= block_count:
            break
        if required > block_size:
            allocations.append(MftAllocation(number, required, False, None))
        else:
            allocations.append(MftAllocation(number, required, True, block_size - required))
            used += 1
    return MftResult(
        block_count=block_count,
        external_fragmentation=external,
        allocations=tuple(allocations),
        memory_full=len(allocations) < len(pending),
    )


@dataclass(frozen=True)
class MvtResult:
    total_memory: int
    allocations: tuple[int, ...]
    memory_full: bool

    @property
    def total_allocated(self) -> int:
        return sum(self.allocations)

    @property
    def external_fragmentation(self) -> int:
        return self.total_memory - self.total_allocated


def allocate_variable(total_memory: int, requests: Iterable[int]) -> MvtResult:
    """Carve requests from free memory in order, stopping at the first that does not fit."""
    free = total_memory
    allocations = []
    memory_full = False
    for required in requests:
        if required > free:
            memory_full = True
            break
        allocations.append(required)
        free -= required
    return MvtResult(total_memory, tuple(allocations), memory_full)