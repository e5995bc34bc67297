"""Simulated system calls that report what they would do."""

from __future__ import annotations

from collections.abc import Callable, Sized

Log = Callable[[str], object]


class SimulatedKernel:
    """Pretend system calls; each writes a line to ``log`` and returns a fixed result."""

    PID = 1234

    def __init__(self, log: Log = print) -> None:
        self._log = log

    def fork(self) -> int:
        self._log("simulating fork() system call_creating a new process")
        return 1

    def exit(self, status: int) -> int:
        self._log(f"simulating exit() system call_process exiting with status {status}")
        return 0

    def open(self, filename: str) -> int:
        self._log(f"simulating open() system call_opening file:{filename}")
        return 1

    def read(self, fd: int, size: int) -> int:
        self._log(f"simulating read() system call_reading {size} bytes from file descriptor {fd}")
        return size

    def write(self, fd: int, data: Sized) -> int:
        count = len(data)
        self._log(f"simulating write() system call_writting {count} bytes to files descriptor {fd}")
        return count

    def getpid(self) -> int:
        self._log("simulating getpid() system call_getting current process id")
        return self.PID


def demo(log: Log = print) -> None:
    """Fork, open a file, write to it and report the process id."""
    kernel = SimulatedKernel(log)
    if kernel.fork() == 0:
        log(f"child process created with PID:{kernel.getpid()}")
        kernel.exit(0)
    fd = kernel.open("my_file,txt")
    kernel.write(fd, "hello world!")
    log(f"current process ID:{kernel.getpid()}")