"""
TicTacToe board representation.

Board representation: numpy int8 array of shape (3, 3)
  - 0: empty
  - +1: X
  - -1: O

Cells are addressed as (row, column); flat index is row * 3 + column.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Tuple

import numpy as np

BOARD_SIZE = 3


class Mark(IntEnum):
    """Cell contents. Integer values make a winning line sum to +3 / -3."""

    EMPTY = 0
    X = 1
    O = -1

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Mark":
        try:
            return _FROM_SYMBOL[symbol]
        except KeyError:
            raise ValueError(f"Unknown mark symbol: {symbol!r}") from None

    def __str__(self) -> str:
        return self.name


_SYMBOLS = {Mark.EMPTY: ".", Mark.X: "X", Mark.O: "O"}
_FROM_SYMBOL = {s: m for m, s in _SYMBOLS.items()}

# Lookup by raw int8 value, used when serializing the grid
_SYMBOL_BY_VALUE = {int(m): s for m, s in _SYMBOLS.items()}


@dataclass(frozen=True)
class Cell:
    row: int
    column: int

    @property
    def index(self) -> int:
        """Flat row-major index."""
        return self.row * BOARD_SIZE + self.column

    @classmethod
    def from_index(cls, index: int) -> "Cell":
        return cls(index // BOARD_SIZE, index % BOARD_SIZE)


Line = Tuple[Cell, Cell, Cell]


def build_all_cells(size: int = BOARD_SIZE) -> Tuple[Cell, ...]:
    """All cells in row-major order."""
    return tuple(Cell(row, col) for row in range(size) for col in range(size))


def build_lines(size: int = BOARD_SIZE) -> Tuple[Line, ...]:
    """Winning lines: rows, then columns, then the two diagonals."""
    rows = [tuple(Cell(row, col) for col in range(size)) for row in range(size)]
    cols = [tuple(Cell(row, col) for row in range(size)) for col in range(size)]
    diagonals = [
        tuple(Cell(i, i) for i in range(size)),
        tuple(Cell(i, size - 1 - i) for i in range(size)),
    ]
    return tuple(rows + cols + diagonals)


ALL_CELLS = build_all_cells()
LINES = build_lines()

# Flat indices of each line, shape (8, 3)
LINE_INDEX = np.array([[cell.index for cell in line] for line in LINES], dtype=np.intp)
LINE_INDEX.setflags(write=False)


class Board:
    """Mutable 3x3 grid of marks."""

    def __init__(self):
        self.grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

    def get(self, cell: Cell) -> Mark:
        return Mark(int(self.grid[cell.row, cell.column]))

    def set(self, cell: Cell, mark: Mark) -> None:
        self.grid[cell.row, cell.column] = int(mark)

    @staticmethod
    def all_cells() -> Tuple[Cell, ...]:
        return ALL_CELLS

    def is_full(self) -> bool:
        return bool(np.all(self.grid != int(Mark.EMPTY)))

    def count(self, mark: Mark) -> int:
        return int(np.count_nonzero(self.grid == int(mark)))

    def flat(self) -> np.ndarray:
        """Row-major view of the 9 cell values."""
        return self.grid.reshape(-1)

    def key(self) -> str:
        """Canonical key: the 9 mark symbols in row-major order."""
        return "".join(_SYMBOL_BY_VALUE[v] for v in self.grid.reshape(-1).tolist())

    def copy(self) -> "Board":
        other = Board()
        other.grid[:] = self.grid
        return other

    @classmethod
    def from_key(cls, key: str) -> "Board":
        if len(key) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Board key must have exactly 9 symbols, got {len(key)}")
        board = cls()
        board.grid[:] = np.array(
            [int(Mark.from_symbol(s)) for s in key], dtype=np.int8
        ).reshape(BOARD_SIZE, BOARD_SIZE)
        return board

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """Build from row strings such as ["XOX", "OXO", "OX."]; spaces are ignored."""
        return cls.from_key("".join(row.replace(" ", "") for row in rows))

    def marks(self) -> List[Mark]:
        return [Mark(v) for v in self.grid.reshape(-1).tolist()]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        return f"Board({self.key()!r})"
