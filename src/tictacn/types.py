# src/tictacn/types.py

from __future__ import annotations
from typing import Literal, Optional, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]      # None is an empty cell
Coord = Tuple[int, int]      # (x, y), zero-indexed; x is the column
