from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, List, Optional

from dropfour.ai.random_agent import RandomAgent
from dropfour.config import COLS, ROWS, default_tokens
from dropfour.game.controller import GameController
from dropfour.game.players import computer
from dropfour.game.state import Status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameRecord:
    game: int
    winner: str      # token of the winner, "" on a tie
    tied: bool
    moves: int
    first: str
    players: int
    width: int
    height: int


def play_series(
    games: int,
    players: int = 2,
    width: int = COLS,
    height: int = ROWS,
    seed: Optional[int] = None,
) -> List[GameRecord]:
    """
    All-computer rotation games between random players. The starting player
    moves one seat along each game.
    """
    if games < 0:
        raise ValueError("games must be >= 0")

    rng = random.Random(seed)
    tokens = list(default_tokens(players))
    records: List[GameRecord] = []

    for i in range(games):
        shift = i % players
        order = [computer(t) for t in tokens[shift:] + tokens[:shift]]
        agents: Dict[str, RandomAgent] = {p.token: RandomAgent(rng, name=p.label) for p in order}

        game = GameController(order, width, height)
        outcome = game.play_out(agents)
        won = outcome.status is Status.WON and outcome.winner is not None

        records.append(
            GameRecord(
                game=i + 1,
                winner=str(outcome.winner.token) if won else "",
                tied=outcome.status is Status.TIED,
                moves=len(game.state.history),
                first=str(order[0].token),
                players=players,
                width=width,
                height=height,
            )
        )
        logger.debug("Game %d/%d: %s", i + 1, games, outcome.message)

    return records


def write_csv(records: List[GameRecord], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=[fl.name for fl in fields(GameRecord)])
        w.writeheader()
        for r in records:
            w.writerow(asdict(r))
    return path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play a series of random computer-only games.")
    ap.add_argument("--games", type=int, default=100)
    ap.add_argument("--players", type=int, default=2)
    ap.add_argument("--width", type=int, default=COLS)
    ap.add_argument("--height", type=int, default=ROWS)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where series_results_*.csv is written")
    ap.add_argument("--log-level", default="INFO")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )

    records = play_series(args.games, args.players, args.width, args.height, args.seed)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out = write_csv(records, Path(args.results_dir) / f"series_results_{stamp}.csv")

    ties = sum(r.tied for r in records)
    logger.info("Played %d games (%d ties). Wrote %s", len(records), ties, out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
