#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

METRICS = ("expanded", "generated", "time_sec")


def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1)/np.sqrt(n)


def load_results(paths: Sequence[Path]) -> pd.DataFrame:
    """Concatenate runner CSVs, keeping solved rows only."""
    frames: List[pd.DataFrame] = []
    for p in paths:
        df = pd.read_csv(p)
        need = {"heuristic", "depth", *METRICS}
        if not need.issubset(df.columns):
            print(f"Skipping {p}: missing columns {sorted(need - set(df.columns))}")
            continue
        df["source"] = Path(p).name
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=["heuristic", "depth", *METRICS, "termination", "solvable"])
    df = pd.concat(frames, ignore_index=True)
    if "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]
    if "solvable" in df.columns:
        df = df[df["solvable"].fillna(1).astype(int) == 1]
    return df.copy()


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean and standard error per (heuristic, depth)."""
    g = df.groupby(["heuristic", "depth"])
    out = g[list(METRICS)].mean()
    for m in METRICS:
        out[f"{m}_sem"] = g[m].agg(sem)
    out["runs"] = g.size()
    return out.reset_index()


def ratio_table(summary: pd.DataFrame, metric: str = "expanded",
                num: str = "misplaced", den: str = "manhattan") -> pd.DataFrame:
    """Per-depth ratio num/den of a mean metric; depths missing either side are dropped."""
    wide = summary.pivot(index="depth", columns="heuristic", values=metric)
    if num not in wide.columns or den not in wide.columns:
        return pd.DataFrame(columns=["depth", num, den, "ratio"])
    wide = wide[[num, den]].dropna()
    wide["ratio"] = wide[num] / wide[den].replace(0, np.nan)
    return wide.reset_index()


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Summarize runner CSVs: misplaced vs Manhattan.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No solved rows to analyze. Are your CSVs empty?")
        return 0

    summary = summarize(df)
    print("=" * 80)
    print("Mean ± sem by heuristic and depth")
    print("=" * 80)
    for (heur, sub) in summary.groupby("heuristic"):
        print(f"\n{heur}:")
        print(f"{'depth':<8}{'expanded':>18}{'generated':>18}{'time_sec':>20}{'runs':>7}")
        for _, r in sub.iterrows():
            print(f"{int(r['depth']):<8}"
                  f"{r['expanded']:>11.1f} ±{r['expanded_sem']:>5.1f}"
                  f"{r['generated']:>11.1f} ±{r['generated_sem']:>5.1f}"
                  f"{r['time_sec']:>12.5f} ±{r['time_sec_sem']:>6.5f}"
                  f"{int(r['runs']):>7}")

    ratios = ratio_table(summary)
    if not ratios.empty:
        print("\nExpanded ratio (misplaced / manhattan):")
        for _, r in ratios.iterrows():
            print(f"  depth {int(r['depth']):>3}: {r['ratio']:.2f}")

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.out, index=False)
        print(f"\nSaved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
