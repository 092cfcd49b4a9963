"""Fixed-size block pool with first-fit allocation and per-block location tags."""

from __future__ import annotations

MAX_BLOCKS = 100
BLOCK_SIZE = 256

LOG_MAX_BLOCKS = 10
LOG_BLOCK_SIZE = 256


class PoolExhaustedError(MemoryError):
    """Raised when every block of a pool is in use."""


class BlockPool:
    """A pool of equally sized, reusable byte blocks.

    Blocks are handed out first-fit: the lowest free block is always chosen.
    Each allocation records a caller-supplied location tag, which is useful
    for finding out who holds a block when the pool runs dry.
    """

    def __init__(self, max_blocks: int = MAX_BLOCKS, block_size: int = BLOCK_SIZE) -> None:
        if max_blocks <= 0:
            raise ValueError("a pool needs at least one block")
        if block_size <= 0:
            raise ValueError("block size must be positive")
        self.max_blocks = max_blocks
        self.block_size = block_size
        self._blocks = [bytearray(block_size) for _ in range(max_blocks)]
        self._locations: list[int | None] = [None] * max_blocks

    def _index_of(self, block: bytearray) -> int:
        for index, candidate in enumerate(self._blocks):
            if candidate is block:
                return index
        raise ValueError("block does not belong to this pool")

    def allocate(self, size: int, location: int) -> bytearray:
        """Hand out the first free block, tagging it with ``location``."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size > self.block_size:
            raise ValueError(
                f"requested {size} bytes but blocks hold only {self.block_size}"
            )
        for index, tag in enumerate(self._locations):
            if tag is None:
                self._locations[index] = location
                return self._blocks[index]
        raise PoolExhaustedError(
            f"memory allocation failed for size {size}: location {location}"
        )

    def free(self, block: bytearray | None) -> None:
        """Return ``block`` to the pool; freeing ``None`` does nothing."""
        if block is None:
            return
        self._locations[self._index_of(block)] = None

    def used_count(self) -> int:
        """Number of blocks currently handed out."""
        return sum(tag is not None for tag in self._locations)

    def location_of(self, block: bytearray) -> int | None:
        """Location tag of an allocated block, or None if the block is free."""
        return self._locations[self._index_of(block)]