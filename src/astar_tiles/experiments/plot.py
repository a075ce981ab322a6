#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from astar_tiles.experiments.analyze import load_results, summarize

# Colors (Okabe-Ito)
COLORS = {"manhattan": "#0072B2", "misplaced": "#E69F00"}


def plot_metric(ax, summary, metric: str):
    for heur, sub in summary.groupby("heuristic"):
        sub = sub.sort_values("depth")
        ax.errorbar(sub["depth"], sub[metric], yerr=sub[f"{metric}_sem"],
                    marker="o", capsize=3, label=heur, color=COLORS.get(heur))
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± sem)")
    ax.grid(True)
    ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def make_plots(csvs: Sequence[Path], outdir: Path, log_y: bool = False) -> List[Path]:
    df = load_results(csvs)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return []
    summary = summarize(df)
    base = "combo" if len(csvs) > 1 else Path(csvs[0]).stem
    saved: List[Path] = []

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "generated", "time_sec"]):
        plot_metric(ax, summary, metric)
        if log_y:
            ax.set_yscale("log")
    fig.tight_layout()
    saved.append(save_fig(fig, outdir, f"{base}_combined"))
    plt.close(fig)

    for metric in ["expanded", "generated", "time_sec"]:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, summary, metric)
        if log_y:
            ax.set_yscale("log")
        fig.tight_layout()
        saved.append(save_fig(fig, outdir, f"{base}_{metric}"))
        plt.close(fig)
    return saved


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--log", action="store_true", help="Log-scale y axes")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    make_plots(args.csv, Path(args.save), log_y=args.log)
    if args.show:
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
