"""Energy model of a square grid of flashing octopuses."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, TextIO

from .errors import InputError, InvalidArgumentError

FLASH_THRESHOLD = 9
RESET_ENERGY_VALUE = 0
DEFAULT_GRID_SIZE = 10


class DumboOctopusModel:
    """A ``size`` by ``size`` grid of octopus energy levels.

    Each step raises every energy level by one; any octopus above the
    threshold flashes, raising its eight neighbours, and is reset to zero.
    """

    flash_threshold = FLASH_THRESHOLD
    reset_energy_value = RESET_ENERGY_VALUE

    def __init__(
        self,
        initial_state: Optional[Sequence[Sequence[int]]] = None,
        size: int = DEFAULT_GRID_SIZE,
    ) -> None:
        if size <= 0:
            raise InvalidArgumentError("Grid size must be positive")
        self._size = size
        if initial_state is None:
            self._grid = [[0] * size for _ in range(size)]
            return
        rows = list(initial_state)
        if len(rows) < size or any(len(row) < size for row in rows[:size]):
            raise InvalidArgumentError(f"Initial state must be at least {size} by {size}")
        self._grid = [[int(value) for value in row[:size]] for row in rows[:size]]

    @classmethod
    def from_stream(cls, stream: TextIO, size: int = DEFAULT_GRID_SIZE) -> "DumboOctopusModel":
        """Read ``size`` lines of digits from a text stream."""
        rows = []
        for _ in range(size):
            line = stream.readline().rstrip("\r\n")
            if len(line) < size:
                raise InputError(f"Octopus line is too short: {line!r}")
            digits = line[:size]
            if not all("0" <= char <= "9" for char in digits):
                raise InputError(f"Invalid octopus line: {line!r}")
            rows.append([ord(char) - ord("0") for char in digits])
        return cls(rows, size)

    @property
    def size(self) -> int:
        return self._size

    def state(self) -> list[list[int]]:
        """A copy of the current energy levels, row by row."""
        return [list(row) for row in self._grid]

    def increment(self) -> "DumboOctopusModel":
        """Raise every energy level by one."""
        self._grid = [[value + 1 for value in row] for row in self._grid]
        return self

    def _neighbours(self, row: int, col: int):
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                r, c = row + dr, col + dc
                if 0 <= r < self._size and 0 <= c < self._size:
                    yield r, c

    def flash(self) -> int:
        """Let every charged octopus flash; return how many flashed."""
        grid = self._grid
        flashed: set[tuple[int, int]] = set()
        pending = [
            (r, c)
            for r, row in enumerate(grid)
            for c, value in enumerate(row)
            if value > FLASH_THRESHOLD
        ]
        while pending:
            cell = pending.pop()
            if cell in flashed:
                continue
            flashed.add(cell)
            for r, c in self._neighbours(*cell):
                if (r, c) in flashed:
                    continue
                grid[r][c] += 1
                if grid[r][c] > FLASH_THRESHOLD:
                    pending.append((r, c))
        for r, c in flashed:
            grid[r][c] = RESET_ENERGY_VALUE
        return len(flashed)

    def step(self, number_of_steps: int) -> int:
        """Run several steps; return the total number of flashes."""
        return sum(self.increment().flash() for _ in range(number_of_steps))

    def find_first_sync_step(self) -> int:
        """Step until every octopus flashes at once; return that step's number."""
        step = 1
        while self.increment().flash() != self._size * self._size:
            step += 1
        return step