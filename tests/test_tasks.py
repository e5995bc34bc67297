import threading

from oslab.tasks import repeat_task, run_batch, run_concurrently, run_sequential


def test_run_batch_default():
    lines = []
    assert run_batch(log=lines.append) == [1, 2, 3]
    assert lines == [
        "processing job 1 ...",
        "processing job 2 ...",
        "processing job 3 ...",
    ]


def test_run_batch_zero():
    lines = []
    assert run_batch(0, lines.append) == []
    assert lines == []


def test_run_sequential_default():
    lines = []
    run_sequential(log=lines.append)
    assert lines == [
        "sample system : executing task 1",
        "sample system : executing task 2",
    ]


def test_run_concurrently_results_in_order():
    assert run_concurrently([lambda: "task1", lambda: "task2"]) == ["task1", "task2"]


def test_run_concurrently_really_concurrent():
    barrier = threading.Barrier(2, timeout=5)

    def task():
        return barrier.wait() in (0, 1)

    assert run_concurrently([task, task]) == [True, True]


def test_run_concurrently_empty():
    assert run_concurrently([]) == []


def test_repeat_task():
    lines = []
    assert repeat_task("task 1", log=lines.append) == 5
    assert lines == ["task 1 running..."] * 5