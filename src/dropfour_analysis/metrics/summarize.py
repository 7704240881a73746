from __future__ import annotations

import pandas as pd


TIE_LABEL = "(tie)"


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def summarize_outcomes(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per token (plus a tie row): wins, games it started, win rate
    over all games and over games it started.
    """
    _require_cols(df, ["winner", "tied", "first"])
    total = len(df)
    if total == 0:
        return pd.DataFrame(columns=["token", "wins", "win_rate", "started", "wins_when_first"])

    tokens = sorted(set(df["first"]) | set(df.loc[df["winner"] != "", "winner"]))
    rows = []
    for t in tokens:
        started = int((df["first"] == t).sum())
        wins = int((df["winner"] == t).sum())
        wins_first = int(((df["winner"] == t) & (df["first"] == t)).sum())
        rows.append({
            "token": t,
            "wins": wins,
            "win_rate": wins / total,
            "started": started,
            "wins_when_first": wins_first,
        })

    ties = int(df["tied"].sum())
    rows.append({
        "token": TIE_LABEL,
        "wins": ties,
        "win_rate": ties / total,
        "started": 0,
        "wins_when_first": 0,
    })

    out = pd.DataFrame(rows)
    return out.sort_values("wins", ascending=False).reset_index(drop=True)


def length_summary(df: pd.DataFrame) -> pd.DataFrame:
    _require_cols(df, ["moves", "tied"])
    if df.empty:
        return pd.DataFrame()
    desc = df.groupby("tied")["moves"].describe(percentiles=[0.25, 0.5, 0.75])
    desc.index = desc.index.map(lambda t: "tied" if t else "won")
    return desc


def first_mover_advantage(df: pd.DataFrame) -> float:
    """Share of decided games won by whoever moved first."""
    _require_cols(df, ["winner", "first"])
    decided = df[df["winner"] != ""]
    if decided.empty:
        return float("nan")
    return float((decided["winner"] == decided["first"]).mean())
