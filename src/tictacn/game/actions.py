from __future__ import annotations

from tictacn.core.board import Board
from tictacn.game.errors import CellOccupied
from tictacn.types import Player


def apply_move(board: Board, x: int, y: int, player: Player) -> None:
    # x, y are zero-indexed and already bounds-checked
    if board.get(x, y) is not None:
        raise CellOccupied(x + 1, y + 1)
    board.set(x, y, player)
