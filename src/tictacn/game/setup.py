from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from tictacn.config import DEFAULT_SIZE, PLAYERS
from tictacn.core.board import Board, BoardParseError
from tictacn.types import Player


@dataclass(frozen=True)
class GameConfig:
    board: Board
    criteria: int
    order: Tuple[Player, Player]
    notices: Tuple[str, ...] = ()


def load_board(arg: Optional[str], notices: List[str]) -> Board:
    """
    A size ("5"), a serialized board ("XON,OXN,ONX") or nothing. Anything
    unreadable falls back to an empty default board.
    """
    if arg is None:
        return Board.new(DEFAULT_SIZE)

    s = arg.strip()
    if s.isascii() and s.isdigit():
        return Board.new(int(s))
    try:
        return Board.parse(s)
    except BoardParseError as e:
        notices.append(f"{e} Using an empty {DEFAULT_SIZE}x{DEFAULT_SIZE} board.")
        return Board.new(DEFAULT_SIZE)


def resolve_criteria(arg: Optional[str], dim: int, notices: List[str]) -> int:
    default = max(dim, 1)
    if arg is None:
        return default

    s = arg.strip()
    if not (s.isascii() and s.isdigit()):
        notices.append(f"Win criteria {arg!r} is not a number; using {default}.")
        return default
    k = int(s)
    if not 1 <= k <= default:
        notices.append(f"Win criteria {k} must be between 1 and {default}; using {default}.")
        return default
    return k


def player_order(first: Optional[Player] = None, rng: Optional[random.Random] = None) -> Tuple[Player, Player]:
    if first is None:
        first = (rng or random.Random()).choice(PLAYERS)
    return (first, "O" if first == "X" else "X")


def build_config(
    board_arg: Optional[str] = None,
    criteria_arg: Optional[str] = None,
    first: Optional[Player] = None,
    seed: Optional[int] = None,
) -> GameConfig:
    notices: List[str] = []
    board = load_board(board_arg, notices)
    criteria = resolve_criteria(criteria_arg, board.dimension, notices)
    order = player_order(first, random.Random(seed))
    return GameConfig(board=board, criteria=criteria, order=order, notices=tuple(notices))
