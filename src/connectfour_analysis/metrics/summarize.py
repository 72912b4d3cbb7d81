from __future__ import annotations

import pandas as pd


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def depth_summary(moves: pd.DataFrame) -> pd.DataFrame:
    """
    Search cost per depth: how many nodes, cutoffs and milliseconds a move
    takes on average. Moves with a single legal column (no search) are kept;
    they are part of what a game costs.
    """
    _require_cols(moves, ["depth", "nodes", "cutoffs", "time_ms"])

    g = moves.groupby("depth")
    out = pd.DataFrame({
        "moves": g.size(),
        "mean_nodes": g["nodes"].mean(),
        "median_nodes": g["nodes"].median(),
        "max_nodes": g["nodes"].max(),
        "mean_cutoffs": g["cutoffs"].mean(),
        "mean_ms": g["time_ms"].mean(),
        "p95_ms": g["time_ms"].quantile(0.95),
    })

    nodes = g["nodes"].sum()
    out["cutoffs_per_node"] = (g["cutoffs"].sum() / nodes.where(nodes > 0)).fillna(0.0)
    out["nodes_per_ms"] = (nodes / g["time_ms"].sum()).fillna(0.0)
    return out.reset_index()


def matchup_table(games: pd.DataFrame) -> pd.DataFrame:
    """One row per (x_depth, o_depth) pairing with X's score (win 1, draw 0.5)."""
    _require_cols(games, ["x_depth", "o_depth", "result"])

    df = games.assign(
        x_win=(games["result"] == "X").astype(int),
        o_win=(games["result"] == "O").astype(int),
        draw=(games["result"] == "D").astype(int),
    )
    out = (
        df.groupby(["x_depth", "o_depth"])
        .agg(games=("result", "size"), x_wins=("x_win", "sum"), o_wins=("o_win", "sum"), draws=("draw", "sum"))
        .reset_index()
    )
    out["x_score"] = (out["x_wins"] + 0.5 * out["draws"]) / out["games"]
    return out


def depth_strength(games: pd.DataFrame) -> pd.DataFrame:
    """Results per depth regardless of colour, sorted strongest first."""
    _require_cols(games, ["x_depth", "o_depth", "result"])

    as_x = pd.DataFrame({
        "depth": games["x_depth"],
        "win": (games["result"] == "X").astype(int),
        "draw": (games["result"] == "D").astype(int),
        "loss": (games["result"] == "O").astype(int),
    })
    as_o = pd.DataFrame({
        "depth": games["o_depth"],
        "win": (games["result"] == "O").astype(int),
        "draw": (games["result"] == "D").astype(int),
        "loss": (games["result"] == "X").astype(int),
    })
    both = pd.concat([as_x, as_o], ignore_index=True)

    out = (
        both.groupby("depth")
        .agg(games=("win", "size"), wins=("win", "sum"), draws=("draw", "sum"), losses=("loss", "sum"))
        .reset_index()
    )
    out["points"] = out["wins"] + 0.5 * out["draws"]
    out["ppg"] = out["points"] / out["games"]
    out = out.sort_values(["ppg", "depth"], ascending=[False, True]).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
