"""Simulations of classic operating-system algorithms: scheduling, paging, memory,
deadlock avoidance, file allocation, bounded buffers, protection, system calls and tasks."""

__version__ = "0.1.0"

__all__ = [
    "buffer",
    "deadlock",
    "filealloc",
    "memory",
    "paging",
    "protection",
    "scheduling",
    "syscalls",
    "tasks",
]