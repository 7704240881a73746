from __future__ import annotations

import argparse
from pathlib import Path

from dropfour.scripts.series import play_series

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results, records_to_frame
from ..metrics.summarize import first_mover_advantage, length_summary, summarize_outcomes
from ..plots.chart import plot_length_histogram, plot_outcomes_bar


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze Connect Four series results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV.")
    ap.add_argument("--results-dir", type=str, default=None, help="Use the latest series_results_*.csv in this directory")
    ap.add_argument("--games", type=int, default=200, help="Without --csv/--results-dir, play this many games in memory")
    ap.add_argument("--players", type=int, default=2)
    ap.add_argument("--seed", type=int, default=None)

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.csv:
        source = args.csv
        df = load_results(LoadSpec(csv_path=Path(args.csv)))
    elif args.results_dir:
        path = load_latest_from_dir(Path(args.results_dir))
        source = str(path)
        df = load_results(LoadSpec(csv_path=path))
    else:
        source = f"{args.games} in-memory games"
        df = records_to_frame(play_series(args.games, players=args.players, seed=args.seed))

    print(f"\nLoaded: {source}")
    print(f"Games: {len(df):,}")

    summary = summarize_outcomes(df)
    print("\n=== Outcomes ===")
    print(summary.to_string(index=False))

    lengths = length_summary(df)
    if not lengths.empty:
        print("\n=== Moves per game ===")
        print(lengths.to_string())

    print(f"\nFirst mover wins {first_mover_advantage(df):.1%} of decided games.")

    if not args.no_plots:
        outdir = Path(args.outdir)
        plot_outcomes_bar(summary, outdir, show=args.show)
        plot_length_histogram(df, outdir, show=args.show)
        if not args.show:
            print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
