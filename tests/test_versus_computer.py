import asyncio
import random

import pytest

from dropfour.errors import ColumnFull, ConfigError, MoveRejectedBusy
from dropfour.game.controller import VersusComputerController
from dropfour.game.players import computer, human
from dropfour.game.sinks import RecordingSink
from dropfour.game.state import Status


class ScriptedAgent:
    name = "Scripted"

    def __init__(self, moves):
        self.moves = list(moves)
        self.calls = 0

    def choose_move(self, board):
        move = self.moves[min(self.calls, len(self.moves) - 1)]
        self.calls += 1
        return move


async def no_sleep(_delay):
    return None


def make_game(agent=None, width=7, height=6, sleep=no_sleep, **kw):
    return VersusComputerController(
        human("red"),
        computer("blue"),
        agent=agent,
        width=width,
        height=height,
        sleep=sleep,
        rng=random.Random(7),
        **kw,
    )


def test_computer_replies_after_human_move():
    sink = RecordingSink()
    game = make_game(ScriptedAgent([6]), sink=sink)

    assert asyncio.run(game.request_move(0))
    assert game.board.cell(5, 0) == "red"
    assert game.board.cell(5, 6) == "blue"
    assert [p.token for _, _, p in sink.placements] == ["red", "blue"]
    assert game.active.token == "red"
    assert not game.busy


def test_human_win_skips_computer_reply():
    agent = ScriptedAgent([1])
    game = make_game(agent)

    async def play():
        for _ in range(4):
            await game.request_move(0)

    asyncio.run(play())
    assert game.outcome.status is Status.WON
    assert game.outcome.winner.token == "red"
    assert agent.calls == 3
    assert game.board.move_count() == 7


def test_computer_can_win():
    game = make_game(ScriptedAgent([6]))

    async def play():
        for col in (0, 1, 2, 4):
            await game.request_move(col)

    asyncio.run(play())
    assert game.outcome.status is Status.WON
    assert game.outcome.winner.token == "blue"
    assert asyncio.run(game.request_move(3)) is False


def test_computer_resamples_full_column():
    agent = ScriptedAgent([0, 0, 1])
    game = make_game(agent, width=2, height=1)

    assert asyncio.run(game.request_move(0))
    assert agent.calls == 3
    assert game.board.cell(0, 1) == "blue"
    assert game.outcome.status is Status.TIED


def test_rejected_human_move_gets_no_reply():
    agent = ScriptedAgent([1])
    game = make_game(agent, width=3, height=2)

    async def play():
        await game.request_move(0)
        await game.request_move(0)
        return await game.request_move(0)

    assert asyncio.run(play()) is False
    assert isinstance(game.last_rejection, ColumnFull)
    assert agent.calls == 2
    assert game.board.move_count() == 4


def test_input_during_thinking_is_dropped():
    async def scenario():
        release = asyncio.Event()

        async def sleep(_delay):
            await release.wait()

        game = make_game(ScriptedAgent([6]), sleep=sleep)
        first = asyncio.create_task(game.request_move(0))
        while not game.busy:
            await asyncio.sleep(0)

        assert await game.request_move(1) is False
        assert isinstance(game.last_rejection, MoveRejectedBusy)

        release.set()
        assert await first is True
        return game

    game = asyncio.run(scenario())
    assert game.board.cell(5, 0) == "red"
    assert game.board.cell(5, 1) is None
    assert game.board.cell(5, 6) == "blue"
    assert game.board.move_count() == 2
    assert not game.busy


def test_thinking_delay_is_bounded():
    delays = []

    async def sleep(delay):
        delays.append(delay)

    game = make_game(ScriptedAgent([6]), sleep=sleep, think_delay_max_sec=0.5)

    async def play():
        for col in (0, 1, 2):
            await game.request_move(col)

    asyncio.run(play())
    assert len(delays) == 3
    assert all(0 <= d <= 0.5 for d in delays)


def test_default_agent_is_random_and_legal():
    game = make_game(think_delay_max_sec=0)

    async def play():
        col = 0
        while not game.is_terminal:
            if game.board.find_landing_row(col) is None:
                col = (col + 1) % game.board.width
                continue
            await game.request_move(col)

    asyncio.run(play())
    assert game.is_terminal
    tokens = [rec.player.token for rec in game.state.history]
    assert all(a != b for a, b in zip(tokens, tokens[1:]))


def test_cancelled_thinking_still_plays_the_reply():
    async def scenario():
        release = asyncio.Event()

        async def sleep(_delay):
            await release.wait()

        game = make_game(ScriptedAgent([6]), sleep=sleep)
        first = asyncio.create_task(game.request_move(0))
        while not game.busy:
            await asyncio.sleep(0)

        first.cancel()
        with pytest.raises(asyncio.CancelledError):
            await first
        assert not game.busy
        assert game.active.token == "red"

        release.set()
        assert await game.request_move(1) is True
        return game

    game = asyncio.run(scenario())
    moves = [(rec.player.token, rec.column) for rec in game.state.history]
    assert moves == [("red", 0), ("blue", 6), ("red", 1), ("blue", 6)]
    assert game.active.token == "red"


def test_roles_are_checked():
    with pytest.raises(ConfigError):
        VersusComputerController(computer("red"), computer("blue"))
    with pytest.raises(ConfigError):
        VersusComputerController(human("red"), human("blue"))
    with pytest.raises(ConfigError):
        VersusComputerController(human("red"), computer("red"))
