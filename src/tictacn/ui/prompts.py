from __future__ import annotations

from tictacn.game.errors import BadX, BadY, OutOfBounds, WrongTokenCount
from tictacn.types import Coord, Player


def prompt(player: Player) -> str:
    return f"{player}, your move: (x y) "


def _is_int(token: str) -> bool:
    return token.isascii() and token.isdigit()


def parse_move(raw: str, dim: int) -> Coord:
    """
    Turn "x y" (1-indexed, x is the column) into a zero-indexed coordinate.
    Raises a MoveError subclass naming what was wrong.
    """
    parts = raw.split()
    if len(parts) != 2:
        raise WrongTokenCount()
    sx, sy = parts
    if not _is_int(sx):
        raise BadX(sx)
    if not _is_int(sy):
        raise BadY(sy)

    x, y = int(sx), int(sy)
    if not (1 <= x <= dim and 1 <= y <= dim):
        raise OutOfBounds(x, y, dim)
    return x - 1, y - 1
