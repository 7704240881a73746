from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_outcomes_bar(summary: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if summary.empty or "token" not in summary.columns:
        return None

    fig = plt.figure(figsize=(8, 4))
    plt.bar(summary["token"].astype(str), summary["win_rate"].astype(float))
    plt.title("Outcome share by token")
    plt.xlabel("token")
    plt.ylabel("share of games")
    return _finish(fig, outdir, "outcomes_bar.png", show=show)


def plot_length_histogram(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "moves" not in df.columns or df["moves"].dropna().empty:
        return None

    fig = plt.figure()
    plt.hist(df["moves"].dropna(), bins=30)
    plt.title("Histogram: moves per game")
    plt.xlabel("moves")
    plt.ylabel("count")
    return _finish(fig, outdir, "hist_moves.png", show=show)
