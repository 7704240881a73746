# src/dropfour/game/players.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional

from dropfour.errors import ConfigError
from dropfour.types import Role, Token


@dataclass(frozen=True, slots=True)
class Player:
    token: Token
    role: Role = "human"
    name: str = ""

    def __post_init__(self) -> None:
        if self.token is None:
            raise ConfigError("A player needs a token.")
        if self.role not in ("human", "computer"):
            raise ConfigError(f"Unknown player role: {self.role!r}")

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        return f"{self.token} {'Computer' if self.role == 'computer' else 'Player'}"

    @property
    def is_computer(self) -> bool:
        return self.role == "computer"


def human(token: Token, name: Optional[str] = None) -> Player:
    return Player(token=token, role="human", name=name or "")


def computer(token: Token, name: Optional[str] = None) -> Player:
    return Player(token=token, role="computer", name=name or "")


def ensure_unique_tokens(players: Iterable[Player]) -> None:
    seen = set()
    for p in players:
        if p.token in seen:
            raise ConfigError(f"Token {p.token!r} is used by more than one player.")
        seen.add(p.token)
