from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, Union

from tictacn.types import Coord, Player


@dataclass(frozen=True)
class Winner:
    player: Player
    # Coordinates of the winning run, for highlighting; not part of equality.
    line: Tuple[Coord, ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class Draw:
    pass


@dataclass(frozen=True)
class InProgress:
    pass


GameResult = Union[Winner, Draw, InProgress]


def is_terminal(result: GameResult) -> bool:
    return not isinstance(result, InProgress)


def describe(result: GameResult) -> str:
    if isinstance(result, Winner):
        return f"The winner is {result.player}"
    if isinstance(result, Draw):
        return "Draw game."
    return "Game in progress."
