from __future__ import annotations

import sys
from typing import Callable, Optional, Tuple

from tictacn.config import PLAYERS, USE_COLOR
from tictacn.core.board import Board
from tictacn.game.actions import apply_move
from tictacn.game.errors import MoveError
from tictacn.game.results import GameResult, Winner, describe, is_terminal
from tictacn.game.state import AwaitingMove, Evaluating, Finished, GameState
from tictacn.types import Player
from tictacn.ui.prompts import parse_move, prompt
from tictacn.ui.render import render


def _stderr(msg: str) -> None:
    print(msg, file=sys.stderr)


def start(board: Board, criteria: int, order: Tuple[Player, Player] = PLAYERS) -> GameState:
    """
    Build the initial state. A board that already holds a result (a parsed
    one, or a full 0x0 board) starts out finished.
    """
    state = GameState(board=board, criteria=criteria, order=order, phase=AwaitingMove(order[0]))
    result = board.evaluate(criteria)
    if is_terminal(result):
        state.phase = Finished(result)
    return state


def evaluate(state: GameState) -> None:
    phase = state.phase
    if not isinstance(phase, Evaluating):
        raise RuntimeError(f"Cannot evaluate from {phase!r}.")

    result = state.board.evaluate(state.criteria)
    if is_terminal(result):
        state.phase = Finished(result)
    else:
        state.phase = AwaitingMove(state.next_player(phase.player))


def submit(state: GameState, raw: str) -> None:
    """
    Play one line of input for the player to move. A MoveError leaves the
    board and the phase untouched so the same player can try again.
    """
    phase = state.phase
    if not isinstance(phase, AwaitingMove):
        raise RuntimeError(f"No move expected in {phase!r}.")

    x, y = parse_move(raw, state.board.dimension)
    apply_move(state.board, x, y, phase.player)
    state.moves += 1
    state.phase = Evaluating(phase.player)
    evaluate(state)


def result_of(state: GameState) -> GameResult:
    if not isinstance(state.phase, Finished):
        raise RuntimeError("Game is not finished.")
    return state.phase.result


def run_game(
    state: GameState,
    ask: Optional[Callable[[str], str]] = None,
    emit: Callable[[str], None] = print,
    warn: Callable[[str], None] = _stderr,
    color: bool = USE_COLOR,
) -> GameResult:
    ask = ask or input
    if not state.finished:
        render(state.board, color=color, emit=emit)

    while not state.finished:
        phase = state.phase
        assert isinstance(phase, AwaitingMove)

        raw = ask(prompt(phase.player))
        try:
            submit(state, raw)
        except MoveError as e:
            warn(str(e))
            continue

        if not state.finished:
            played = " ".join(raw.split())
            status = f"Move {state.moves}: {phase.player} played {played}"
            render(state.board, status=status, color=color, emit=emit)

    result = result_of(state)
    line = result.line if isinstance(result, Winner) else None
    render(state.board, highlight=line, color=color, emit=emit)
    emit(state.board.to_compact_string())
    emit(describe(result))
    return result
