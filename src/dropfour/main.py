from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys
from typing import Callable, Dict, List, Optional

from dropfour.ai.base import Agent
from dropfour.ai.random_agent import RandomAgent
from dropfour.config import COLS, ROWS, THINK_DELAY_MAX_SEC, GameConfig, default_tokens
from dropfour.errors import ConfigError
from dropfour.game.controller import GameController, VersusComputerController
from dropfour.game.players import Player, computer, human
from dropfour.game.state import Outcome
from dropfour.types import Token
from dropfour.ui.human import HumanAgent, QuitGame
from dropfour.ui.prompts import parse_move
from dropfour.ui.render import TextRenderSink

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour", description="Play Connect Four in the terminal.")
    ap.add_argument(
        "--mode",
        choices=["rotation", "computer"],
        default="computer",
        help="rotation: N players take turns; computer: you against a random computer player",
    )
    ap.add_argument("--players", type=int, default=2, help="Number of players in rotation mode")
    ap.add_argument(
        "--computers",
        type=int,
        default=0,
        help="How many of the rotation players are random computer players (taken from the end)",
    )
    ap.add_argument("--width", type=int, default=COLS, help="Grid width")
    ap.add_argument("--height", type=int, default=ROWS, help="Grid height")
    ap.add_argument("--tokens", nargs="+", default=None, help="Player colors, in turn order")
    ap.add_argument("--think", type=float, default=THINK_DELAY_MAX_SEC, help="Max computer thinking delay (seconds)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the computer player")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return ap


def make_config(args: argparse.Namespace) -> GameConfig:
    n = 2 if args.mode == "computer" else args.players
    tokens = tuple(args.tokens) if args.tokens else default_tokens(n)
    if len(tokens) != n:
        raise ConfigError(f"Expected {n} tokens, got {len(tokens)}.")
    return GameConfig(width=args.width, height=args.height, tokens=tokens, think_delay_max_sec=args.think)


def run_rotation(cfg: GameConfig, computers: int = 0, seed: Optional[int] = None) -> Outcome:
    if computers < 0 or computers > len(cfg.tokens):
        raise ConfigError(f"--computers must be between 0 and {len(cfg.tokens)}.")

    cut = len(cfg.tokens) - computers
    players: List[Player] = [human(t) for t in cfg.tokens[:cut]] + [computer(t) for t in cfg.tokens[cut:]]

    rng = random.Random(seed)
    agents: Dict[Token, Agent] = {}
    for p in players:
        if p.is_computer:
            agents[p.token] = RandomAgent(rng, name=p.label)
        else:
            agents[p.token] = HumanAgent(prompt=f"{p.label} move (1-{cfg.width}, q quits): ")

    sink = TextRenderSink(cfg.width, cfg.height, status=f"{players[0].label} starts.")
    game = GameController(players, cfg.width, cfg.height, sink=sink)
    sink.render()
    return game.play_out(agents)


async def run_versus_computer(
    cfg: GameConfig,
    seed: Optional[int] = None,
    read: Callable[[str], str] = input,
    agent: Optional[Agent] = None,
) -> Outcome:
    you, comp = human(cfg.tokens[0], "You"), computer(cfg.tokens[1])
    sink = TextRenderSink(cfg.width, cfg.height, status="You start.")
    game = VersusComputerController(
        you,
        comp,
        agent=agent,
        width=cfg.width,
        height=cfg.height,
        sink=sink,
        rng=random.Random(seed),
        think_delay_max_sec=cfg.think_delay_max_sec,
    )
    sink.render()

    while not game.is_terminal:
        raw = await asyncio.to_thread(read, f"Your move (1-{cfg.width}, q quits): ")
        try:
            move = parse_move(raw, cfg.width)
        except ValueError as e:
            print(e)
            continue
        if move is None:
            raise QuitGame()
        if not await game.request_move(move):
            print(f"Column {move + 1} is full.")

    return game.outcome


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = make_config(args)
        if args.mode == "computer":
            outcome = asyncio.run(run_versus_computer(cfg, seed=args.seed))
        else:
            outcome = run_rotation(cfg, computers=args.computers, seed=args.seed)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (QuitGame, KeyboardInterrupt, EOFError):
        print("\nGame quit.")
        return 0

    logger.info("Final outcome: %s", outcome.message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
