# src/dropfour/game/controller.py

from __future__ import annotations
import asyncio
import logging
import random
from typing import Awaitable, Callable, Mapping, Optional, Sequence

from dropfour.ai.base import Agent
from dropfour.ai.random_agent import RandomAgent
from dropfour.config import COLS, MAX_STRATEGY_ATTEMPTS, ROWS, THINK_DELAY_MAX_SEC
from dropfour.core.board import Board
from dropfour.core.rules import winning_line
from dropfour.errors import (
    ConfigError,
    GameAlreadyTerminal,
    InvalidColumn,
    MoveRejected,
    MoveRejectedBusy,
    OutOfTurn,
    StrategyExhausted,
)
from dropfour.game.players import Player, ensure_unique_tokens
from dropfour.game.sinks import NullSink, RenderSink
from dropfour.game.state import GameState, MoveRecord, Outcome
from dropfour.types import Move, Token

logger = logging.getLogger(__name__)


class _Controller:
    """Move protocol shared by both play modes. Owns the only writable GameState."""

    def __init__(
        self,
        players: Sequence[Player],
        width: int = COLS,
        height: int = ROWS,
        sink: Optional[RenderSink] = None,
    ) -> None:
        if len(players) < 2:
            raise ConfigError("At least two players are required.")
        ensure_unique_tokens(players)

        self.state = GameState(board=Board(width, height), players=list(players))
        self.sink: RenderSink = sink or NullSink()
        self.last_rejection: Optional[MoveRejected] = None

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def active(self) -> Player:
        return self.state.active

    @property
    def outcome(self) -> Outcome:
        return self.state.outcome

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal

    def _apply_move(self, player: Player, column: Move) -> int:
        if self.state.is_terminal:
            raise GameAlreadyTerminal("The game is over.")

        if player != self.state.active:
            raise OutOfTurn(f"It is not {player.label}'s turn.")

        board = self.state.board
        row = board.drop(column, player.token)
        self.state.history.append(MoveRecord(player, row, int(column)))
        logger.debug("%s -> (%d, %d)", player.label, row, column)
        self.sink.on_place(row, int(column), player)

        # win before tie: a full board with a line is a win
        line = winning_line(board, player.token)
        if line is not None:
            self._finish(Outcome.won(player, line))
        elif board.is_full():
            self._finish(Outcome.tied())
        else:
            self.state.rotate()
        return row

    def _finish(self, outcome: Outcome) -> None:
        self.state.outcome = outcome
        logger.info("Game over after %d moves: %s", len(self.state.history), outcome.message)
        self.sink.on_game_end(outcome)

    def _reject(self, column: object, err: MoveRejected) -> bool:
        self.last_rejection = err
        logger.debug("Ignored move request %r (%s): %s", column, err.reason, err)
        return False

    def _choose_legal(self, agent: Agent) -> Move:
        """Ask ``agent`` until it names a column with room."""
        for _ in range(MAX_STRATEGY_ATTEMPTS):
            col = agent.choose_move(self.state.board.copy())
            try:
                if self.state.board.find_landing_row(col) is not None:
                    return col
            except InvalidColumn:
                pass
            logger.debug("%s picked unplayable column %r, asking again", agent.name, col)
        raise StrategyExhausted(
            f"{agent.name} gave no playable column in {MAX_STRATEGY_ATTEMPTS} tries."
        )


class GameController(_Controller):
    """
    Any number of players (two or more) taking turns in rotation.
    After a move that does not end the game the mover goes to the back
    of the order.
    """

    def request_move(self, column: Move) -> bool:
        """Play ``column`` for the active player. False when the request was ignored."""
        try:
            self._apply_move(self.state.active, column)
        except MoveRejected as e:
            return self._reject(column, e)
        self.last_rejection = None
        return True

    def play_turn(self, agent: Agent) -> bool:
        if self.is_terminal:
            return self._reject(None, GameAlreadyTerminal("The game is over."))
        return self.request_move(self._choose_legal(agent))

    def play_out(self, agents: Mapping[Token, Agent]) -> Outcome:
        """Let agents (keyed by token) play until the game ends."""
        while not self.is_terminal:
            self.play_turn(agents[self.state.active.token])
        return self.outcome


class VersusComputerController(_Controller):
    """
    One human against one computer. After each accepted human move the
    controller stays locked for a random "thinking" delay, then plays the
    computer's reply. Requests arriving while locked are dropped.
    """

    def __init__(
        self,
        human: Player,
        computer: Player,
        agent: Optional[Agent] = None,
        width: int = COLS,
        height: int = ROWS,
        sink: Optional[RenderSink] = None,
        rng: Optional[random.Random] = None,
        think_delay_max_sec: float = THINK_DELAY_MAX_SEC,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        if human.is_computer or not computer.is_computer:
            raise ConfigError("Expected one human player and one computer player.")
        if think_delay_max_sec < 0:
            raise ConfigError("Thinking delay cannot be negative.")

        super().__init__([human, computer], width, height, sink)
        self.human = human
        self.computer = computer
        self.rng = rng or random.Random()
        self.agent: Agent = agent or RandomAgent(self.rng, name=computer.label)
        self.think_delay_max_sec = think_delay_max_sec
        self._sleep = sleep
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    async def request_move(self, column: Move) -> bool:
        """
        Human move, then (unless the game ended) the computer's reply.
        Returns False when the human request was ignored.
        """
        if self._lock.locked():
            return self._reject(column, MoveRejectedBusy("Computer is thinking."))

        async with self._lock:
            try:
                self._apply_move(self.human, column)
            except MoveRejected as e:
                return self._reject(column, e)
            self.last_rejection = None

            if not self.is_terminal:
                # the reply is played even if the wait is cancelled
                try:
                    await self._think()
                finally:
                    self._apply_move(self.computer, self._choose_legal(self.agent))
            return True

    async def _think(self) -> None:
        delay = self.rng.uniform(0, self.think_delay_max_sec) if self.think_delay_max_sec else 0.0
        logger.debug("%s thinking for %.3fs", self.computer.label, delay)
        await self._sleep(delay)
