# oslab

Small, dependency-free simulations of the algorithms met in an operating-systems
course. Each module works on plain Python values and returns results you can
inspect, print or test. Errors are raised as exceptions defined in the module
concerned.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `oslab.scheduling` | `first_come_first_served`, `shortest_job_first` and `priority_schedule` return a `Schedule` of `ProcessStat` rows, with `average_waiting_time()`, `average_turnaround_time()` and `format_table()` |
| `oslab.paging` | `fifo_replacement` and `optimal_replacement` return a `ReplacementResult` (frame snapshots, fault count, `fault_rate()`); `PagedMemory` loads page tables and translates logical addresses, raising `MemoryFullError` or `InvalidAddressError` |
| `oslab.memory` | `allocate_fixed` (MFT, returns `MftResult` of `MftAllocation`) and `allocate_variable` (MVT, returns `MvtResult`) with fragmentation totals |
| `oslab.deadlock` | `bankers_safe_sequence` returns a list of `BankerStep` or raises `UnsafeStateError`; `job_safe_sequence` orders `Job`s by need into a `JobSequence` |
| `oslab.filealloc` | A `Disk` (50 blocks by default) with `allocate_contiguous` and `allocate_indexed`, raising `BlockAllocatedError` |
| `oslab.buffer` | A circular `BoundedBuffer` raising `BufferFullError` and `BufferEmptyError` |
| `oslab.protection` | An `AccessMatrix` of `AccessRight` values, `default_matrix()`, and `safe_copy` raising `BufferOverflowError` |
| `oslab.syscalls` | A `SimulatedKernel` whose `fork`, `exit`, `open`, `read`, `write` and `getpid` log a line and return a fixed result, and `demo()` |
| `oslab.tasks` | `run_batch`, `run_sequential`, `run_concurrently` (one thread per task) and `repeat_task` |

Functions that report progress take a `log` callable, `print` by default, so
output can be collected in a list with `log=lines.append`.

## Examples

CPU scheduling:

```python
from oslab.scheduling import shortest_job_first

schedule = shortest_job_first([6, 8, 7, 3])
print(schedule.format_table())
print(schedule.average_waiting_time(), schedule.average_turnaround_time())
```

`priority_schedule(bursts, priorities)` runs the lowest priority number first;
processes with equal keys keep the order the exchange sort leaves them in.

Page replacement:

```python
from oslab.paging import fifo_replacement, optimal_replacement

refs = [2, 3, 2, 1, 5, 2, 4, 5, 3, 2, 5, 2]
fifo = fifo_replacement(refs, 3)
opt = optimal_replacement(refs, 3)
print(fifo.faults, opt.faults, opt.fault_rate())
```

`faults` counts every replacement plus one load for each frame; empty frames
appear as `None` in `snapshots`.

Address translation:

```python
from oslab.paging import PagedMemory

memory = PagedMemory(memory_size=1000, page_size=100)
pid = memory.add_process([4, 7])
print(memory.translate(pid, 1, 25))  # 725
```

Memory allocation:

```python
from oslab.memory import allocate_fixed, allocate_variable

mft = allocate_fixed(1000, 300, [275, 400, 290, 293])
print(mft.block_count, mft.total_internal_fragmentation, mft.external_fragmentation, mft.memory_full)

mvt = allocate_variable(1000, [400, 275, 550])
print(mvt.allocations, mvt.external_fragmentation, mvt.memory_full)
```

Deadlock avoidance:

```python
from oslab.deadlock import Job, bankers_safe_sequence, job_safe_sequence

steps = bankers_safe_sequence(
    claim=[[3, 2, 2], [6, 1, 3], [3, 1, 4], [4, 2, 2]],
    allocation=[[1, 0, 0], [6, 1, 2], [2, 1, 1], [0, 0, 2]],
    total=[9, 3, 6],
)
for step in steps:
    print(step.process, step.available)

result = job_safe_sequence([Job("a", 4), Job("b", 2), Job("c", 9)], available=7)
print(result.safe, result.blocked, result.is_safe)
```

File allocation, the bounded buffer and protection:

```python
from oslab.buffer import BoundedBuffer
from oslab.filealloc import Disk
from oslab.protection import default_matrix, safe_copy

disk = Disk(50)
disk.allocate_contiguous(4, 3)
disk.allocate_indexed(10, [11, 12, 13])
print(sorted(disk.allocated_blocks))

buffer = BoundedBuffer(10)   # holds at most 9 items
buffer.produce(42)
print(buffer.consume())

print(default_matrix().describe(1, 2))  # subject 1 has NO_ACCESS access to object 2
print(safe_copy(10, "safe"))
```

A contiguous allocation that meets a used block stops there and keeps the
blocks it already took; an indexed allocation that meets a used data block
keeps its index block but takes no data blocks.

## What it does not do

The package is a library only. It has no command-line program and no
interactive prompts: inputs are passed as arguments and results come back as
values, so any menu or question-and-answer front end is left to the caller.
Nothing is stored between runs.