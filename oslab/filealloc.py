"""Disk block allocation: contiguous (sequential) and indexed files."""

from __future__ import annotations

from collections.abc import Iterable


class BlockAllocatedError(Exception):
    """A block needed by a file is already in use."""

    def __init__(self, block: int) -> None:
        super().__init__(f"block {block} already allocated")
        self.block = block


class Disk:
    """A fixed number of blocks, each either free or allocated."""

    def __init__(self, block_count: int = 50) -> None:
        if block_count < 0:
            raise ValueError("block count must not be negative")
        self.block_count = block_count
        self._allocated: set[int] = set()

    def _check(self, block: int) -> None:
        if not 0 <= block < self.block_count:
            raise ValueError(f"block {block} outside disk of {self.block_count} blocks")

    def is_allocated(self, block: int) -> bool:
        self._check(block)
        return block in self._allocated

    @property
    def allocated_blocks(self) -> frozenset[int]:
        return frozenset(self._allocated)

    def allocate_contiguous(self, start: int, length: int) -> list[int]:
        """Allocate ``length`` blocks from ``start`` on, one after another.

        Blocks are taken in order; on meeting one already in use the run
        stops with :class:`BlockAllocatedError`, and the blocks taken before
        it stay allocated.
        """
        if length < 0:
            raise ValueError("length must not be negative")
        taken = []
        for block in range(start, start + length):
            self._check(block)
            if block in self._allocated:
                raise BlockAllocatedError(block)
            self._allocated.add(block)
            taken.append(block)
        return taken

    def allocate_indexed(self, index_block: int, blocks: Iterable[int]) -> list[int]:
        """Allocate an index block and the data blocks it lists.

        The index block is claimed first; if any data block is already in
        use, :class:`BlockAllocatedError` is raised, no data block is
        allocated, and the index block stays claimed.
        """
        self._check(index_block)
        if index_block in self._allocated:
            raise BlockAllocatedError(index_block)
        self._allocated.add(index_block)
        data = list(blocks)
        for block in data:
            self._check(block)
        for block in data:
            if block in self._allocated:
                raise BlockAllocatedError(block)
        self._allocated.update(data)
        return data