from __future__ import annotations

import argparse
import sys

from tictacn.config import USE_COLOR
from tictacn.game.controller import run_game, start
from tictacn.game.setup import build_config


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tictacn",
        description="Two-player tic-tac-toe on an NxN board with a configurable run length to win.",
    )
    ap.add_argument("board", nargs="?", default=None,
                    help="Board size (default 3) or a serialized board such as XON,OXN,ONX (N or _ is empty)")
    ap.add_argument("criteria", nargs="?", default=None,
                    help="Marks in a row needed to win (default: the board size)")
    ap.add_argument("--first", choices=["X", "O"], default=None, help="Player who moves first (default: random)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for picking the first player")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    cfg = build_config(args.board, args.criteria, first=args.first, seed=args.seed)
    for note in cfg.notices:
        print(note, file=sys.stderr)

    state = start(cfg.board, cfg.criteria, cfg.order)
    try:
        run_game(state, color=USE_COLOR and not args.no_color)
    except (EOFError, KeyboardInterrupt):
        print("\nInput closed.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
