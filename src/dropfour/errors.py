# src/dropfour/errors.py

from __future__ import annotations


class MoveRejected(ValueError):
    """A move request that is ignored without touching the game state."""

    reason = "rejected"


class InvalidColumn(MoveRejected):
    reason = "invalid_column"


class ColumnFull(MoveRejected):
    reason = "column_full"


class GameAlreadyTerminal(MoveRejected):
    reason = "game_over"


class MoveRejectedBusy(MoveRejected):
    reason = "busy"


class OutOfTurn(MoveRejected):
    reason = "out_of_turn"


class ConfigError(ValueError):
    pass


class StrategyExhausted(RuntimeError):
    """A move source kept choosing unplayable columns."""
