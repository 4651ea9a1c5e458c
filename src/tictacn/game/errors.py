from __future__ import annotations


class MoveError(ValueError):
    """A rejected move; the same player is asked again."""


class WrongTokenCount(MoveError):
    def __init__(self) -> None:
        super().__init__("Invalid input: enter two numbers, X then Y.")


class BadX(MoveError):
    def __init__(self, token: str) -> None:
        super().__init__(f"X is not a valid int: {token!r}")


class BadY(MoveError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Y is not a valid int: {token!r}")


class OutOfBounds(MoveError):
    def __init__(self, x: int, y: int, dim: int) -> None:
        super().__init__(f"X or Y out of bounds: ({x}, {y}) must be between 1 and {dim}.")


class CellOccupied(MoveError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"({x}, {y}) is already occupied! Try again.")
