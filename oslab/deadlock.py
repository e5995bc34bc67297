"""Deadlock avoidance: the banker's safety check and a single-resource job sequencer."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

T = TypeVar("T")


class UnsafeStateError(Exception):
    """No order exists in which every process can finish."""


@dataclass(frozen=True)
class BankerStep:
    """A process (counting from 1) that ran, and the resources free after it released its own."""

    process: int
    available: tuple[int, ...]


def bankers_safe_sequence(
    claim: Sequence[Sequence[int]],
    allocation: Sequence[Sequence[int]],
    total: Sequence[int],
) -> list[BankerStep]:
    """Find a safe order of processes, repeatedly sweeping over those not yet finished."""
    claim_rows = [tuple(row) for row in claim]
    alloc_rows = [tuple(row) for row in allocation]
    totals = tuple(total)
    if len(claim_rows) != len(alloc_rows):
        raise ValueError("claim and allocation need one row per process")
    if any(len(row) != len(totals) for row in claim_rows + alloc_rows):
        raise ValueError("every row needs one entry per resource")

    held = [sum(column) for column in zip(*alloc_rows)] if alloc_rows else [0] * len(totals)
    work = [t - h for t, h in zip(totals, held)]
    need = [tuple(c - a for c, a in zip(c_row, a_row)) for c_row, a_row in zip(claim_rows, alloc_rows)]
    finished = [False] * len(claim_rows)
    steps: list[BankerStep] = []

    while len(steps) < len(claim_rows):
        progressed = False
        for index, (need_row, alloc_row) in enumerate(zip(need, alloc_rows)):
            if finished[index] or not all(n <= w for n, w in zip(need_row, work)):
                continue
            work = [w + a for w, a in zip(work, alloc_row)]
            finished[index] = True
            steps.append(BankerStep(index + 1, tuple(work)))
            progressed = True
        if not progressed:
            waiting = [i + 1 for i, done in enumerate(finished) if not done]
            raise UnsafeStateError(f"processes {waiting} can never finish")
    return steps


@dataclass(frozen=True)
class Job:
    name: str
    time: int


@dataclass(frozen=True)
class JobSequence:
    """Jobs that could run in order, jobs that could not, and what was left over."""

    safe: list[Job] = field(default_factory=list)
    blocked: list[Job] = field(default_factory=list)
    available: int = 0

    @property
    def is_safe(self) -> bool:
        return not self.blocked


def _exchange_sort(items: Iterable[T], key: Callable[[T], int]) -> list[T]:
    # Pairwise exchange sort; its handling of ties decides the run order.
    ordered = list(items)
    for i in range(len(ordered)):
        for k in range(i + 1, len(ordered)):
            if key(ordered[i]) > key(ordered[k]):
                ordered[i], ordered[k] = ordered[k], ordered[i]
    return ordered


def job_safe_sequence(jobs: Iterable[Job], available: int) -> JobSequence:
    """Run jobs from the smallest need upward while the resource lasts."""
    safe: list[Job] = []
    blocked: list[Job] = []
    for job in _exchange_sort(jobs, key=lambda j: j.time):
        if job.time <= available:
            safe.append(job)
            available -= job.time
        else:
            blocked.append(job)
    return JobSequence(safe, blocked, available)