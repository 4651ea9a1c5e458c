from __future__ import annotations
from typing import TYPE_CHECKING, Iterator, List, Optional

from tictacn.config import PLAYERS
from tictacn.game.results import Draw, GameResult, InProgress, Winner
from tictacn.types import Coord, Player

if TYPE_CHECKING:
    from tictacn.core.board import Board


def lines(dim: int) -> Iterator[List[Coord]]:
    """
    Every line a run may lie on, each in scan order: rows left to right,
    columns top to bottom, then the two principal diagonals.
    """
    for y in range(dim):
        yield [(x, y) for x in range(dim)]
    for x in range(dim):
        yield [(x, y) for y in range(dim)]
    yield [(i, i) for i in range(dim)]
    yield [(dim - 1 - i, i) for i in range(dim)]


def _run_in_line(board: Board, line: List[Coord], player: Player, criteria: int) -> Optional[List[Coord]]:
    run = 0
    for i, (x, y) in enumerate(line):
        if board.get(x, y) == player:
            run += 1
        else:
            run = 0
        if run >= criteria:
            return line[i - run + 1:i + 1]
    return None


def evaluate(board: Board, criteria: int) -> GameResult:
    if criteria < 1:
        raise ValueError(f"Win criteria must be at least 1, got {criteria}.")

    dim = board.dimension
    for player in PLAYERS:
        for line in lines(dim):
            run = _run_in_line(board, line, player, criteria)
            if run is not None:
                return Winner(player, tuple(run))

    if board.is_full():
        return Draw()
    return InProgress()
