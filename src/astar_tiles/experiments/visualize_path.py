#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from astar_tiles.domains.grid import Grid, parse_tiles
from astar_tiles.domains.puzzlen import NPuzzle
from astar_tiles.search.a_star import a_star


def draw_board(grid: Grid, out_path: Path, title: Optional[str] = None):
    n = len(grid)
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1, color="black")
        ax.plot([i, i], [0, n], linewidth=1, color="black")
    for r, row in enumerate(grid):
        for c, t in enumerate(row):
            if t == 0: continue
            ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def save_path_frames(path: Sequence[Grid], outdir: Path) -> List[Path]:
    frames = []
    for i, grid in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(grid, p, title=f"move {i}")
        frames.append(p)
    return frames


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--heuristic", choices=["misplaced", "manhattan"], default="manhattan")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--start", default=None, help="Start tiles row-major; default is a seeded scramble")
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    dom = NPuzzle(args.n)
    start = parse_tiles(args.start, args.n) if args.start else dom.scramble(args.depth, args.seed).grid
    res = a_star(start, dom.GOAL.grid, heuristic=args.heuristic, return_path=True)

    if not res.get("path"):
        print(f"No path ({res['termination']}).")
        return 1

    frames = save_path_frames(res["path"], Path(args.outdir))
    print(f"Saved {len(frames)} frames to {args.outdir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
