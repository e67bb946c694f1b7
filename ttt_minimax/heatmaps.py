#!/usr/bin/env python3
"""
Minimax move-score heatmaps for N×N TicTacToe.

Usage:
  python -m ttt_minimax.heatmaps --size 3
  python -m ttt_minimax.heatmaps --size 4 --depth 4 --player O --outdir out_4x4
Outputs a CSV of move scores and a PNG heatmap for the empty board.
"""
import argparse
from pathlib import Path
from typing import Dict, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from .board import BoardState, Player, Position
from .errors import InvalidConfig
from .search import SearchEngine


def scores_to_grid(scores: Dict[Position, float], size: int) -> np.ndarray:
    """n×n float grid of move scores, NaN where no score (occupied cells)."""
    data = np.full((size, size), np.nan)
    for (row, col), score in scores.items():
        data[row][col] = score
    return data


def score_grid(board: BoardState, engine: SearchEngine) -> np.ndarray:
    return scores_to_grid(engine.score_moves(board), board.size)


def move_table(board: BoardState, engine: SearchEngine) -> pd.DataFrame:
    n = board.size
    rows = []
    for (r, c), score in engine.score_moves(board).items():
        rows.append({"row": r, "col": c, "move_index": r * n + c, "score": score})
    return pd.DataFrame(rows, columns=["row", "col", "move_index", "score"])


def plot_heatmap(data: np.ndarray, title: str, outfile: Optional[str] = None):
    plt.figure(figsize=(6, 6))
    sns.heatmap(data,
                annot=True,          # score in each cell
                fmt=".2f",
                cmap='viridis',
                cbar=False,
                linewidths=.5,
                linecolor='black',
                annot_kws={"size": 14})
    plt.title(title)
    if outfile is None:
        plt.show()
        return None
    plt.savefig(outfile, bbox_inches="tight")
    plt.close()
    return outfile


def main(argv=None):
    ap = argparse.ArgumentParser(description="Write minimax move scores and a heatmap for the empty board.")
    ap.add_argument("--size", type=int, default=3, help="board dimension N")
    ap.add_argument("--player", choices=["X", "O"], default="X", help="side the scores are computed for")
    ap.add_argument("--depth", type=int, default=None, help="search depth (default: min(cells, 9))")
    ap.add_argument("--no-prune", action="store_true", help="plain minimax, no alpha-beta")
    ap.add_argument("--outdir", default=".", help="directory for the CSV and PNG")
    args = ap.parse_args(argv)

    try:
        board = BoardState(args.size)
        engine = SearchEngine(Player.parse(args.player), depth=args.depth, use_alpha_beta=not args.no_prune)
    except InvalidConfig as e:
        ap.error(str(e))

    n = board.size
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    df = move_table(board, engine)
    csv_path = outdir / f"move_scores_{n}x{n}.csv"
    df.to_csv(csv_path, index=False)

    grid = df.sort_values(["row", "col"])["score"].to_numpy(dtype=float).reshape(n, n)
    png_path = outdir / f"heatmap_{n}x{n}_minimax.png"
    plot_heatmap(grid, f"{n}x{n}: Minimax Move Scores ({args.player} to move)", str(png_path))

    print("Searched:", engine.nodes, "positions")
    print("Wrote:", csv_path)
    print("Wrote:", png_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
