"""A rectangular board addressed by 1-based row and column."""

from __future__ import annotations

EMPTY = "*"
MAX_SIZE = 12


class Grid:
    """A board of single-character cells, all empty at the start."""

    def __init__(self, rows: int, cols: int) -> None:
        if not (1 <= rows <= MAX_SIZE and 1 <= cols <= MAX_SIZE):
            raise ValueError(
                f"grid dimensions must be between 1 and {MAX_SIZE}, got {rows}x{cols}"
            )
        self.rows = rows
        self.cols = cols
        self._cells = [[EMPTY] * cols for _ in range(rows)]

    def render(self) -> str:
        """Return the board as text, each cell followed by a space."""
        lines = ("".join(f"{value} " for value in row) + "\n" for row in self._cells)
        return "".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True if (row, col) lies on the board."""
        return 1 <= row <= self.rows and 1 <= col <= self.cols

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.rows}x{self.cols} grid")

    def place_ship(self, row: int, col: int, size: int) -> None:
        """Mark (row, col) with the digit for a ship of ``size``."""
        self.mark(row, col, chr(ord("0") + size))

    def is_free(self, row: int, col: int) -> bool:
        """Return True if (row, col) is still empty."""
        return self.cell(row, col) == EMPTY

    def mark(self, row: int, col: int, value: str) -> None:
        """Set the cell at (row, col) to ``value``."""
        self._check(row, col)
        self._cells[row - 1][col - 1] = value

    def cell(self, row: int, col: int) -> str:
        """Return the character stored at (row, col)."""
        self._check(row, col)
        return self._cells[row - 1][col - 1]