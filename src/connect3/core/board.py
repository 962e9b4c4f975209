# src/connect3/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from connect3.config import ROWS, COLS
from connect3.types import Cell, Coord, Move, Piece, Player, owner_of

_CHARS = {
    "r": Piece(Player.RED),
    "y": Piece(Player.YELLOW),
    "R": Piece(Player.RED, king=True),
    "Y": Piece(Player.YELLOW, king=True),
    ".": None,
}


def _char(cell: Cell) -> str:
    if cell is None:
        return "."
    ch = "r" if cell.player is Player.RED else "y"
    return ch.upper() if cell.king else ch


@dataclass(slots=True)
class Board:
    """
    Fixed 6x5 grid. Row 0 is the top row, row ``rows - 1`` the bottom.

    The engine treats a Board as a value: every transition works on a
    ``copy()`` and the new board replaces the old one wholesale.
    """
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from top-to-bottom strings, e.g. ``"..r.."``.
        ``r``/``y`` are plain pieces, ``R``/``Y`` kings, ``.`` empty.
        """
        lines = [line.replace(" ", "") for line in rows]
        if len(lines) != ROWS or any(len(line) != COLS for line in lines):
            raise ValueError(f"Board needs {ROWS} rows of {COLS} cells.")
        try:
            grid = [[_CHARS[ch] for ch in line] for line in lines]
        except KeyError as e:
            raise ValueError(f"Unknown cell character: {e.args[0]!r}") from None
        return cls(grid=grid)

    def to_rows(self) -> List[str]:
        return ["".join(_char(cell) for cell in row) for row in self.grid]

    def __str__(self) -> str:
        return "\n".join(self.to_rows())

    def copy(self) -> "Board":
        b = Board(self.rows, self.cols)
        b.grid = [row[:] for row in self.grid]
        return b

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def cell(self, r: int, c: int) -> Cell:
        return self.grid[r][c]

    def owner_at(self, r: int, c: int) -> Optional[Player]:
        return owner_of(self.grid[r][c])

    # ----- pure queries -----
    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def lowest_empty_row(self, col: int) -> Optional[int]:
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                return r
        return None

    def is_column_full(self, col: int) -> bool:
        return self.grid[0][col] is not None

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def count_pieces(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def count_kings(self, player: Player) -> int:
        return sum(
            1
            for row in self.grid
            for cell in row
            if cell is not None and cell.king and cell.player is player
        )

    def king_counts(self) -> Dict[Player, int]:
        return {p: self.count_kings(p) for p in Player}

    def is_settled(self) -> bool:
        """True when no column has an empty cell below a piece."""
        for c in range(self.cols):
            seen_piece = False
            for r in range(self.rows):
                if self.grid[r][c] is not None:
                    seen_piece = True
                elif seen_piece:
                    return False
        return True

    # ----- mutation (only ever on a private copy) -----
    def drop(self, col: Move, piece: Piece) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")
        r = self.lowest_empty_row(c)
        if r is None:
            raise ValueError("Column is full.")
        self.grid[r][c] = piece
        return r

    def clear(self, positions: Iterable[Coord]) -> None:
        for r, c in positions:
            self.grid[r][c] = None

    def place(self, pos: Coord, piece: Cell) -> None:
        r, c = pos
        self.grid[r][c] = piece
