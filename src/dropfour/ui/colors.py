from __future__ import annotations
from dropfour.config import USE_COLOR
from dropfour.types import Token

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_BLUE = "\033[34m"
FG_MAGENTA = "\033[35m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

TOKEN_COLORS = {
    "red": FG_RED,
    "green": FG_GREEN,
    "yellow": FG_YELLOW,
    "blue": FG_BLUE,
    "magenta": FG_MAGENTA,
    "cyan": FG_CYAN,
}


def c(s: str, code: str) -> str:
    if not USE_COLOR or not code:
        return s
    return f"{code}{s}{RESET}"


def token_color(token: Token) -> str:
    return TOKEN_COLORS.get(str(token).lower(), "")
