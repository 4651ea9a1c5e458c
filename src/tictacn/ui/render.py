from __future__ import annotations
from typing import Callable, Iterable, Optional, Set

from tictacn.config import USE_COLOR
from tictacn.core.board import Board, symbol
from tictacn.types import Cell, Coord
from tictacn.ui.colors import c, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE

_MARK_COLORS = {"X": FG_RED, "O": FG_YELLOW}


def _piece(cell: Cell, color: bool) -> str:
    return c(symbol(cell), _MARK_COLORS.get(cell, FG_GRAY), color)  # type: ignore[arg-type]


def format_board(board: Board, highlight: Optional[Iterable[Coord]] = None, color: bool = USE_COLOR) -> str:
    """
    Bracketed grid with 1-based column numbers across the top and row numbers
    down the side, matching the "x y" move input. Cells in `highlight` are
    shown in reverse video.
    """
    dim = board.dimension
    hl: Set[Coord] = set(highlight) if highlight else set()
    width = len(str(dim))

    out = [c(" " * (width + 1) + "".join(f"{x + 1:^3}" for x in range(dim)), DIM, color)]
    for y in range(dim):
        cells = []
        for x in range(dim):
            p = _piece(board.get(x, y), color)
            if (x, y) in hl:
                p = c(p, REVERSE, color)
            cells.append(f"[{p}]")
        out.append(c(f"{y + 1:>{width}} ", DIM, color) + "".join(cells))
    return "\n".join(out)


def render(
    board: Board,
    status: str = "",
    highlight: Optional[Iterable[Coord]] = None,
    color: bool = USE_COLOR,
    emit: Callable[[str], None] = print,
) -> None:
    emit(format_board(board, highlight, color))
    if status:
        emit(c(status, FG_CYAN, color))
