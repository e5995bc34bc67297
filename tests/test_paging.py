import pytest

from oslab.paging import (
    InvalidAddressError,
    MemoryFullError,
    PagedMemory,
    fifo_replacement,
    optimal_replacement,
)

REFERENCES = [2, 3, 2, 1, 5, 2, 4, 5, 3, 2, 5, 2]


def test_fifo_reference_string():
    result = fifo_replacement(REFERENCES, 3)
    assert result.faults == 9
    assert result.snapshots[-1] == (3, 5, 2)


def test_optimal_reference_string():
    result = optimal_replacement(REFERENCES, 3)
    assert result.faults == 6


@pytest.mark.parametrize("algorithm", [fifo_replacement, optimal_replacement])
def test_snapshots_hold_current_page(algorithm):
    result = algorithm(REFERENCES, 3)
    assert len(result.snapshots) == len(REFERENCES)
    for page, frames in zip(REFERENCES, result.snapshots):
        assert page in frames
        assert len(frames) == 3


@pytest.mark.parametrize("algorithm", [fifo_replacement, optimal_replacement])
def test_all_distinct_fit(algorithm):
    result = algorithm([1, 2, 3], 3)
    assert result.faults == 3
    assert result.fault_rate() == pytest.approx(100.0)
    assert result.snapshots[0] == (1, None, None)


def test_optimal_never_worse_than_fifo():
    refs = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
    for frames in (1, 2, 3, 4):
        assert optimal_replacement(refs, frames).faults <= fifo_replacement(refs, frames).faults


def test_fault_rate_empty():
    with pytest.raises(ValueError):
        fifo_replacement([], 3).fault_rate()


@pytest.mark.parametrize("algorithm", [fifo_replacement, optimal_replacement])
def test_zero_frames_rejected(algorithm):
    with pytest.raises(ValueError):
        algorithm([1, 2], 0)


def test_translate_round_trip():
    memory = PagedMemory(100, 10)
    number = memory.add_process([5, 6])
    assert number == 1
    address = memory.translate(number, 1, 3)
    assert divmod(address, memory.page_size) == (6, 3)


def test_pages_available_fit_memory():
    memory = PagedMemory(105, 10)
    assert memory.pages_available * memory.page_size <= memory.memory_size
    assert (memory.pages_available + 1) * memory.page_size > memory.memory_size
    assert memory.remaining_pages == memory.pages_available


def test_memory_full():
    memory = PagedMemory(40, 10)
    memory.add_process([1, 2, 3])
    with pytest.raises(MemoryFullError):
        memory.add_process([4, 5])
    assert memory.process_count == 1


@pytest.mark.parametrize("address", [(2, 0, 0), (0, 0, 0), (1, 2, 0), (1, 0, 10), (1, -1, 0)])
def test_invalid_address(address):
    memory = PagedMemory(100, 10)
    memory.add_process([5, 6])
    with pytest.raises(InvalidAddressError):
        memory.translate(*address)


def test_bad_page_size():
    with pytest.raises(ValueError):
        PagedMemory(100, 0)