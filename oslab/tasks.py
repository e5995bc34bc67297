"""Batch, sequential and concurrent running of simple tasks."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

Log = Callable[[str], object]


def run_batch(job_count: int = 3, log: Log = print) -> list[int]:
    """Process jobs 1..job_count one after another; return their ids."""
    jobs = list(range(1, job_count + 1))
    for job in jobs:
        log(f"processing job {job} ...")
    return jobs


def run_sequential(tasks: Iterable[str] = ("task 1", "task 2"), log: Log = print) -> list[str]:
    """Execute named tasks in order; return the names executed."""
    done = []
    for task in tasks:
        log(f"sample system : executing {task}")
        done.append(task)
    return done


def run_concurrently(tasks: Sequence[Callable[[], Any]]) -> list[Any]:
    """Start every task on its own thread, wait for all, return results in task order."""
    if not tasks:
        return []
    with ThreadPoolExecutor(max_workers=len(tasks)) as pool:
        futures = [pool.submit(task) for task in tasks]
        return [future.result() for future in futures]


def repeat_task(name: str, times: int = 5, log: Log = print) -> int:
    """Report ``name`` running ``times`` times; return the number of reports."""
    for _ in range(times):
        log(f"{name} running...")
    return max(times, 0)