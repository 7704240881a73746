# src/dropfour/game/state.py

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from dropfour.core.board import Board
from dropfour.game.players import Player
from dropfour.types import Coord


class Status(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


@dataclass(frozen=True, slots=True)
class Outcome:
    status: Status
    winner: Optional[Player] = None
    line: Tuple[Coord, ...] = ()     # winning cells, empty unless won

    @classmethod
    def won(cls, player: Player, line: Sequence[Coord] = ()) -> "Outcome":
        return cls(Status.WON, player, tuple(line))

    @classmethod
    def tied(cls) -> "Outcome":
        return cls(Status.TIED)

    @property
    def message(self) -> str:
        if self.status is Status.WON and self.winner is not None:
            return f"{self.winner.label} won!"
        if self.status is Status.TIED:
            return "Tie!"
        return "Game in progress."


IN_PROGRESS = Outcome(Status.IN_PROGRESS)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    player: Player
    row: int
    column: int


@dataclass(slots=True)
class GameState:
    board: Board
    players: List[Player]           # players[0] moves next
    outcome: Outcome = IN_PROGRESS
    history: List[MoveRecord] = field(default_factory=list)

    @property
    def active(self) -> Player:
        return self.players[0]

    @property
    def is_terminal(self) -> bool:
        return self.outcome.status is not Status.IN_PROGRESS

    def rotate(self) -> None:
        # acting player goes to the back
        self.players.append(self.players.pop(0))
