# src/dropfour/game/sinks.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Protocol, Tuple

from dropfour.game.players import Player
from dropfour.game.state import Outcome


class RenderSink(Protocol):
    def on_place(self, row: int, column: int, player: Player) -> None:
        ...

    def on_game_end(self, outcome: Outcome) -> None:
        ...


class NullSink:
    def on_place(self, row: int, column: int, player: Player) -> None:
        pass

    def on_game_end(self, outcome: Outcome) -> None:
        pass


@dataclass
class RecordingSink:
    """Keeps every notification in memory; handy for batch runs and tests."""

    placements: List[Tuple[int, int, Player]] = field(default_factory=list)
    endings: List[Outcome] = field(default_factory=list)

    def on_place(self, row: int, column: int, player: Player) -> None:
        self.placements.append((row, column, player))

    def on_game_end(self, outcome: Outcome) -> None:
        self.endings.append(outcome)
