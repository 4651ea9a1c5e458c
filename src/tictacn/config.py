# src/tictacn/config.py

from __future__ import annotations

from typing import Dict

from tictacn.types import Cell, Player

DEFAULT_SIZE = 3

# Evaluation order; also the default turn order before any shuffle.
PLAYERS: tuple[Player, Player] = ("O", "X")

EMPTY_SYMBOL = "_"
# Characters read by Board.parse; anything else is skipped
MARK_CHARS: Dict[str, Cell] = {
    "X": "X", "x": "X",
    "O": "O", "o": "O",
    "N": None, "n": None, "_": None,
}

# UI toggles
USE_COLOR = True
