# src/dropfour/config.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from dropfour.errors import ConfigError
from dropfour.types import Token

ROWS = 6
COLS = 7
CONNECT_N = 4

DEFAULT_TOKENS: Tuple[str, ...] = ("red", "blue", "green", "yellow", "magenta", "cyan")

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# "computer is thinking" window; input arriving inside it is dropped
THINK_DELAY_MAX_SEC = 1.0

# how many times a naive strategy is re-asked before giving up
MAX_STRATEGY_ATTEMPTS = 1000


def default_tokens(n: int) -> Tuple[str, ...]:
    if n < 2:
        raise ConfigError("At least two players are required.")
    if n > len(DEFAULT_TOKENS):
        raise ConfigError(f"No default tokens for more than {len(DEFAULT_TOKENS)} players.")
    return DEFAULT_TOKENS[:n]


@dataclass(frozen=True)
class GameConfig:
    width: int = COLS
    height: int = ROWS
    tokens: Tuple[Token, ...] = DEFAULT_TOKENS[:2]
    think_delay_max_sec: float = THINK_DELAY_MAX_SEC

    def __post_init__(self) -> None:
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"Grid {label} must be a positive integer, got {value!r}.")
        if len(self.tokens) < 2:
            raise ConfigError("At least two players are required.")
        if len(set(self.tokens)) != len(self.tokens):
            raise ConfigError(f"Player tokens must be unique: {list(self.tokens)}")
        if any(t is None for t in self.tokens):
            raise ConfigError("None cannot be used as a player token.")
        if self.think_delay_max_sec < 0:
            raise ConfigError("Thinking delay cannot be negative.")
