from __future__ import annotations
from typing import Optional, Iterable, Set

from connect3.config import CLEAR_SCREEN, USE_COLOR
from connect3.core.board import Board
from connect3.types import Cell, Coord, Player

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

_PLAYER_COLOR = {Player.RED: "\033[31m", Player.YELLOW: "\033[33m"}
_EMPTY_COLOR = "\033[90m"
_STATUS_COLOR = "\033[36m"
_KINGS_COLOR = "\033[35m"


def c(s: str, code: str) -> str:
    return f"{code}{s}{RESET}" if USE_COLOR else s


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", _EMPTY_COLOR)
    return c("♛" if cell.king else "●", _PLAYER_COLOR[cell.player])


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def king_line(board: Board) -> str:
    counts = board.king_counts()
    return f"Kings  red {counts[Player.RED]}  yellow {counts[Player.YELLOW]}"


def render(
    board: Board,
    status: str = "",
    highlight: Optional[Iterable[Coord]] = None,
    *,
    title: str = "CONNECT 3",
    show_kings: bool = False,
) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(c(title, BOLD))
    if status:
        print(c(status, _STATUS_COLOR))
    else:
        print()
    if show_kings:
        print(c(king_line(board), _KINGS_COLOR))

    nums = "   " + " ".join(str(i + 1) for i in range(board.cols))
    print(c(nums, DIM))

    for r in range(board.rows):
        parts = []
        for cidx in range(board.cols):
            p = _piece(board.grid[r][cidx])
            if (r, cidx) in hl:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)

        print(" | " + " ".join(parts) + " |")

    print(c("   " + "─" * (2 * board.cols - 1), DIM))
    print(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))
