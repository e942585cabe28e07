from __future__ import annotations

from typing import Tuple

import numpy as np

from .config import DEFAULT_MEMORY_SIZE
from .errors import PointerOverflowError, PointerUnderflowError


class MemoryTape:
    """Fixed-size byte tape with a single pointer.

    ``max_reached`` is the highest index the pointer has ever visited. Every
    cell past it is guaranteed to still be zero, so usage figures only need
    to look at ``cells[:max_reached + 1]``.
    """

    def __init__(self, size: int = DEFAULT_MEMORY_SIZE):
        if size < 1:
            raise ValueError(f"memory size must be at least 1, got {size}")
        self.cells = np.zeros(size, dtype=np.uint8)
        self.pointer = 0
        self.max_reached = 0

    def __len__(self) -> int:
        return len(self.cells)

    def move_right(self) -> None:
        if self.pointer >= len(self.cells) - 1:
            raise PointerOverflowError(
                message="pointer out of bounds (out of memory)",
                pointer=self.pointer,
                index=-1,
            )
        self.pointer += 1
        if self.pointer > self.max_reached:
            self.max_reached = self.pointer

    def move_left(self) -> None:
        if self.pointer <= 0:
            raise PointerUnderflowError(
                message="pointer out of bounds",
                pointer=self.pointer,
                index=-1,
            )
        self.pointer -= 1

    # Cells are converted to int before the arithmetic so numpy never sees
    # an out-of-range uint8 value.
    def increment(self) -> None:
        self.cells[self.pointer] = (int(self.cells[self.pointer]) + 1) & 0xFF

    def decrement(self) -> None:
        self.cells[self.pointer] = (int(self.cells[self.pointer]) - 1) & 0xFF

    def read(self) -> int:
        return int(self.cells[self.pointer])

    def write(self, value: int) -> None:
        self.cells[self.pointer] = int(value) & 0xFF

    def usage(self) -> Tuple[int, int]:
        """Return ``(non_zero_count, highest_address_used)``."""
        non_zero = int(np.count_nonzero(self.cells[: self.max_reached + 1]))
        return non_zero, self.max_reached + 1

    def window(self, start_offset: int, end_offset: int) -> Tuple[int, int]:
        start = max(self.pointer - start_offset, 0)
        end = min(self.pointer + end_offset, len(self.cells) - 1)
        return start, end
