from __future__ import annotations

RESET = "\033[0m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"


def c(s: str, code: str, enabled: bool = True) -> str:
    if not enabled:
        return s
    return f"{code}{s}{RESET}"
