"""Non-preemptive CPU scheduling: first come first served, shortest job first, priority."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ProcessStat:
    """Timing of one process in a schedule."""

    process: int
    burst_time: int
    waiting_time: int
    turnaround_time: int
    priority: int | None = None


@dataclass(frozen=True)
class Schedule:
    """Processes in the order they run, with their timings."""

    processes: list[ProcessStat] = field(default_factory=list)

    def average_waiting_time(self) -> float:
        return sum(p.waiting_time for p in self.processes) / len(self.processes)

    def average_turnaround_time(self) -> float:
        return sum(p.turnaround_time for p in self.processes) / len(self.processes)

    def format_table(self) -> str:
        """Render the schedule as a tab-separated table followed by the averages."""
        with_priority = any(p.priority is not None for p in self.processes)
        header = ["PROCESS"]
        if with_priority:
            header.append("PRIORITY")
        header += ["BURST TIME", "WAITING TIME", "TURNAROUND TIME"]
        lines = ["\t".join(header)]
        for stat in self.processes:
            cells = [f"p{stat.process}"]
            if with_priority:
                cells.append(str(stat.priority))
            cells += [str(stat.burst_time), str(stat.waiting_time), str(stat.turnaround_time)]
            lines.append("\t".join(cells))
        lines.append(f"Average waiting time -- {self.average_waiting_time():f}")
        lines.append(f"Average turnaround time -- {self.average_turnaround_time():f}")
        return "\n".join(lines)


def _exchange_sort(items: Iterable[T], key: Callable[[T], int]) -> list[T]:
    # Pairwise exchange sort; its handling of ties decides the run order.
    ordered = list(items)
    for i in range(len(ordered)):
        for k in range(i + 1, len(ordered)):
            if key(ordered[i]) > key(ordered[k]):
                ordered[i], ordered[k] = ordered[k], ordered[i]
    return ordered


def _build(entries: Sequence[tuple[int, int, int | None]]) -> Schedule:
    if not entries:
        raise ValueError("at least one process is required")
    stats = []
    clock = 0
    for process, burst, priority in entries:
        stats.append(ProcessStat(process, burst, clock, clock + burst, priority))
        clock += burst
    return Schedule(stats)


def first_come_first_served(burst_times: Iterable[int]) -> Schedule:
    """Run processes in the order given."""
    return _build([(pid, burst, None) for pid, burst in enumerate(burst_times)])


def shortest_job_first(burst_times: Iterable[int]) -> Schedule:
    """Run processes from the shortest burst to the longest."""
    entries = [(pid, burst, None) for pid, burst in enumerate(burst_times)]
    return _build(_exchange_sort(entries, key=lambda entry: entry[1]))


def priority_schedule(burst_times: Iterable[int], priorities: Iterable[int]) -> Schedule:
    """Run processes by priority, the lowest number first."""
    bursts = list(burst_times)
    ranks = list(priorities)
    if len(bursts) != len(ranks):
        raise ValueError("each process needs exactly one priority")
    entries = [(pid, burst, rank) for pid, (burst, rank) in enumerate(zip(bursts, ranks))]
    return _build(_exchange_sort(entries, key=lambda entry: entry[2]))