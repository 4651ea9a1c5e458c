from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

from tictacn.config import PLAYERS
from tictacn.core.board import Board
from tictacn.game.results import GameResult
from tictacn.types import Player


@dataclass(frozen=True)
class AwaitingMove:
    player: Player


@dataclass(frozen=True)
class Evaluating:
    player: Player  # who just moved


@dataclass(frozen=True)
class Finished:
    result: GameResult


Phase = Union[AwaitingMove, Evaluating, Finished]


@dataclass(slots=True)
class GameState:
    board: Board
    criteria: int
    order: Tuple[Player, Player] = PLAYERS
    phase: Phase = AwaitingMove(PLAYERS[0])
    moves: int = 0

    @property
    def finished(self) -> bool:
        return isinstance(self.phase, Finished)

    def next_player(self, player: Player) -> Player:
        a, b = self.order
        return b if player == a else a
