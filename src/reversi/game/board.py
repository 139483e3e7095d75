"""
Board module for Reversi.
Holds the 8x8 grid of cell states and the two stone colors.
Uses a numpy array for the grid, with EMPTY marking a free cell.
"""
from enum import IntEnum
from numbers import Integral
from typing import Iterator, Optional, Tuple
import numpy as np

Coord = Tuple[int, int]

# Grid value of a cell with no stone
EMPTY = 0


class Color(IntEnum):
    """A playable side. The integer value is the stone's grid encoding."""
    BLACK = 1
    WHITE = 2

    def opposite(self) -> 'Color':
        """Return the other color."""
        return Color.WHITE if self is Color.BLACK else Color.BLACK


# A cell is either empty (None) or occupied by a stone of one color
CellState = Optional[Color]


class Board:
    """
    Represents the 8x8 Reversi grid.

    Each cell holds EMPTY (0), Color.BLACK (1) or Color.WHITE (2).
    Cells are only ever written with a color, so a stone can change
    color but a cell never becomes empty again.
    """

    # Board dimensions
    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    def __init__(self, size: int = 8, grid: Optional[np.ndarray] = None):
        """
        Initialize the starting position, or wrap an existing grid.

        Args:
            size: Board size, only 8 is supported
            grid: Prepared 8x8 int8 grid to use as-is instead of the
                starting position
        """
        if size != self.SIZE:
            raise ValueError("Only 8x8 board is supported")

        self.size = size
        if grid is not None:
            self._grid = grid
            return
        self._grid = np.full((size, size), EMPTY, dtype=np.int8)
        mid = size // 2
        self._grid[mid - 1, mid - 1] = Color.BLACK  # (3, 3)
        self._grid[mid, mid] = Color.BLACK          # (4, 4)
        self._grid[mid - 1, mid] = Color.WHITE      # (3, 4)
        self._grid[mid, mid - 1] = Color.WHITE      # (4, 3)

    @classmethod
    def from_rows(cls, rows) -> 'Board':
        """
        Build a board from eight strings of eight characters.

        'B' is a black stone, 'W' a white stone, anything else is empty.
        Useful for setting up arbitrary positions.
        """
        grid = np.full((cls.SIZE, cls.SIZE), EMPTY, dtype=np.int8)
        if len(rows) != cls.SIZE or any(len(row) != cls.SIZE for row in rows):
            raise ValueError("Expected 8 rows of 8 cells")
        symbols = {'B': Color.BLACK, 'W': Color.WHITE}
        for i, row in enumerate(rows):
            for j, ch in enumerate(row):
                grid[i, j] = symbols.get(ch.upper(), EMPTY)
        return cls(grid=grid)

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        return Board(self.size, grid=self._grid.copy())

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """Check whether (row, col) are integers that lie on the board."""
        if not (isinstance(row, Integral) and isinstance(col, Integral)):
            return False
        return 0 <= row < Board.SIZE and 0 <= col < Board.SIZE

    def get(self, row: int, col: int) -> CellState:
        """Return the stone at (row, col), or None for an empty cell."""
        value = int(self._grid[row, col])
        return None if value == EMPTY else Color(value)

    def is_empty(self, row: int, col: int) -> bool:
        return self._grid[row, col] == EMPTY

    def place(self, row: int, col: int, color: Color) -> None:
        """
        Put a stone of the given color at (row, col).

        Used both for the placed stone and for each flipped stone.

        Raises:
            ValueError: If color is not a Color, or the board is frozen
        """
        if not isinstance(color, Color):
            raise ValueError(f"Not a stone color: {color!r}")
        if self.frozen:
            raise ValueError("Board is frozen; copy() it to make changes")
        self._grid[row, col] = color

    def freeze(self) -> None:
        """Make the grid read-only. Copies of a frozen board are writable."""
        self._grid.flags.writeable = False

    @property
    def frozen(self) -> bool:
        return not self._grid.flags.writeable

    def cells(self) -> Iterator[Coord]:
        """Iterate over all coordinates in row-major order."""
        for i in range(self.SIZE):
            for j in range(self.SIZE):
                yield (i, j)

    def count(self, color: Color) -> int:
        """Number of stones of the given color."""
        return int(np.count_nonzero(self._grid == color))

    def is_full(self) -> bool:
        return not np.any(self._grid == EMPTY)

    def snapshot(self) -> Tuple[Tuple[CellState, ...], ...]:
        """Read-only grid of cell states, indexed [row][col]."""
        return tuple(
            tuple(self.get(i, j) for j in range(self.SIZE))
            for i in range(self.SIZE)
        )

    def to_array(self) -> np.ndarray:
        """
        Get the board as a numpy array.

        Returns:
            Copy of the 8x8 int8 grid (0 empty, 1 black, 2 white)
        """
        return self._grid.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        return hash(self._grid.tobytes())

    def __str__(self) -> str:
        """Return a string representation of the board."""
        symbols = {EMPTY: '.', Color.BLACK: 'B', Color.WHITE: 'W'}
        rows = ['  ' + ' '.join(str(j) for j in range(self.SIZE))]
        for i in range(self.SIZE):
            row = [symbols[int(self._grid[i, j])] for j in range(self.SIZE)]
            rows.append(f"{i} " + ' '.join(row))
        return "\n".join(rows)
