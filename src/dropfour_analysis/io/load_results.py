from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from dropfour.scripts.series import GameRecord


DEFAULT_EXPECTED_COLS = [
    "game", "winner", "tied", "moves", "first", "players", "width", "height",
]

NUMERIC_COLS = ["game", "moves", "players", "width", "height"]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    expected_cols: tuple[str, ...] = tuple(DEFAULT_EXPECTED_COLS)


def _coerce(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    for c in NUMERIC_COLS:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    if "tied" in out.columns:
        out["tied"] = out["tied"].astype(str).str.strip().str.lower().isin({"true", "1"})
    for c in ("winner", "first"):
        if c in out.columns:
            out[c] = out[c].fillna("").astype(str)
    return out


def _check_cols(df: pd.DataFrame, expected: Sequence[str]) -> None:
    missing = [c for c in expected if c not in df.columns]
    if missing:
        raise ValueError(f"Results missing required columns: {missing}. Columns: {list(df.columns)}")


def records_to_frame(records: Iterable[GameRecord]) -> pd.DataFrame:
    df = pd.DataFrame([asdict(r) for r in records], columns=DEFAULT_EXPECTED_COLS)
    return _coerce(df)


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path, keep_default_na=False)
    df.columns = [c.strip() for c in df.columns]
    _check_cols(df, spec.expected_cols)
    return _coerce(df)


def load_latest_from_dir(results_dir: Path, pattern: str = "series_results_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # timestamped names sort chronologically
    return files[-1]
