# src/tictacn/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from math import isqrt
from typing import List

from tictacn.config import DEFAULT_SIZE, EMPTY_SYMBOL, MARK_CHARS
from tictacn.core.rules import evaluate
from tictacn.game.results import GameResult
from tictacn.types import Cell, Player


class BoardParseError(ValueError):
    pass


def symbol(cell: Cell) -> str:
    return EMPTY_SYMBOL if cell is None else cell


@dataclass(slots=True)
class Board:
    """
    Square grid stored as a flat row-major list: index = x + y * dimension.
    """
    cells: List[Cell] = field(default_factory=lambda: [None] * (DEFAULT_SIZE * DEFAULT_SIZE))
    _dim: int = field(init=False, repr=False, compare=False, default=0)

    def __post_init__(self) -> None:
        dim = isqrt(len(self.cells))
        if dim * dim != len(self.cells):
            raise BoardParseError(f"{len(self.cells)} cells do not form a square board.")
        self._dim = dim

    @classmethod
    def new(cls, dimension: int = DEFAULT_SIZE) -> "Board":
        if dimension < 0:
            raise ValueError("Dimension must not be negative.")
        return cls([None] * (dimension * dimension))

    @classmethod
    def parse(cls, text: str) -> "Board":
        """
        Read a serialized board. X and O are the players, N or _ an empty cell
        (any case); every other character is skipped, so "XON,OXN,ONX" and
        "XONOXNONX" are the same board.
        """
        cells: List[Cell] = []
        for ch in text:
            if ch in MARK_CHARS:
                cells.append(MARK_CHARS[ch])
        try:
            return cls(cells)
        except BoardParseError as e:
            raise BoardParseError(f"Cannot parse board {text!r}: {e}") from None

    @property
    def dimension(self) -> int:
        return self._dim

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._dim and 0 <= y < self._dim):
            raise IndexError(f"({x}, {y}) is outside a {self._dim}x{self._dim} board.")
        return x + y * self._dim

    def get(self, x: int, y: int) -> Cell:
        return self.cells[self._index(x, y)]

    def set(self, x: int, y: int, player: Player) -> None:
        i = self._index(x, y)
        if player not in ("X", "O"):
            raise ValueError(f"Cannot place {player!r}; only X or O.")
        if self.cells[i] is not None:
            raise ValueError(f"({x}, {y}) is already occupied.")
        self.cells[i] = player

    def empty_count(self) -> int:
        return self.cells.count(None)

    def is_full(self) -> bool:
        return self.empty_count() == 0

    def to_compact_string(self) -> str:
        return "".join(symbol(c) for c in self.cells)

    def render(self) -> str:
        dim = self._dim
        return "".join(
            "".join(f"[{symbol(self.cells[x + y * dim])}]" for x in range(dim)) + "\n"
            for y in range(dim)
        )

    def evaluate(self, criteria: int) -> GameResult:
        return evaluate(self, criteria)

    def winner(self) -> GameResult:
        # Classic rule: a full row, column or diagonal.
        return evaluate(self, max(self._dim, 1))

    def __str__(self) -> str:
        return self.render()
