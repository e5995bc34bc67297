import statistics

import pytest

from oslab.scheduling import (
    first_come_first_served,
    priority_schedule,
    shortest_job_first,
)


def _check_timeline(schedule):
    first = schedule.processes[0]
    assert first.waiting_time == 0
    for stat in schedule.processes:
        assert stat.turnaround_time == stat.waiting_time + stat.burst_time
    for before, after in zip(schedule.processes, schedule.processes[1:]):
        assert after.waiting_time == before.turnaround_time


def test_fcfs_keeps_order():
    bursts = [24, 3, 3]
    schedule = first_come_first_served(bursts)
    assert [p.process for p in schedule.processes] == [0, 1, 2]
    assert [p.burst_time for p in schedule.processes] == bursts
    _check_timeline(schedule)


def test_fcfs_textbook_average():
    schedule = first_come_first_served([24, 3, 3])
    assert schedule.average_waiting_time() == pytest.approx(17.0)


def test_averages_are_means():
    schedule = first_come_first_served([6, 8, 7, 3])
    assert schedule.average_waiting_time() == pytest.approx(
        statistics.mean(p.waiting_time for p in schedule.processes)
    )
    assert schedule.average_turnaround_time() == pytest.approx(
        statistics.mean(p.turnaround_time for p in schedule.processes)
    )


def test_sjf_sorts_bursts():
    bursts = [6, 8, 7, 3]
    schedule = shortest_job_first(bursts)
    ordered = [p.burst_time for p in schedule.processes]
    assert ordered == sorted(bursts)
    assert sorted(p.process for p in schedule.processes) == [0, 1, 2, 3]
    for stat in schedule.processes:
        assert bursts[stat.process] == stat.burst_time
    _check_timeline(schedule)


def test_sjf_tie_order_follows_exchange_sort():
    schedule = shortest_job_first([3, 3, 1])
    assert [p.process for p in schedule.processes] == [2, 1, 0]


def test_sjf_not_worse_than_fcfs():
    bursts = [10, 1, 7, 2, 5]
    assert (
        shortest_job_first(bursts).average_waiting_time()
        <= first_come_first_served(bursts).average_waiting_time()
    )


def test_priority_order():
    bursts = [10, 1, 2, 1, 5]
    priorities = [3, 1, 4, 5, 2]
    schedule = priority_schedule(bursts, priorities)
    ranks = [p.priority for p in schedule.processes]
    assert ranks == sorted(priorities)
    for stat in schedule.processes:
        assert bursts[stat.process] == stat.burst_time
        assert priorities[stat.process] == stat.priority
    _check_timeline(schedule)


def test_priority_length_mismatch():
    with pytest.raises(ValueError):
        priority_schedule([1, 2], [1])


@pytest.mark.parametrize("func", [first_come_first_served, shortest_job_first])
def test_empty_rejected(func):
    with pytest.raises(ValueError):
        func([])


def test_format_table():
    schedule = first_come_first_served([24, 3, 3])
    table = schedule.format_table()
    lines = table.splitlines()
    assert len(lines) == 1 + 3 + 2
    assert lines[0].startswith("PROCESS")
    assert lines[1].startswith("p0")
    assert "17.000000" in lines[-2]
    assert "PRIORITY" not in lines[0]


def test_format_table_with_priority():
    table = priority_schedule([4, 2], [2, 1]).format_table()
    assert "PRIORITY" in table.splitlines()[0]
    assert table.splitlines()[1].startswith("p1")