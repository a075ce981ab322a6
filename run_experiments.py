#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

PY = sys.executable

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("8-puzzle, both heuristics",
        f"{PY} -m astar_tiles.experiments.runner --n 3 --depths 4 8 12 16 20 --per_depth 20 --heuristic both --include_unsolvable --out results/p8.csv")
    run("15-puzzle, Manhattan",
        f"{PY} -m astar_tiles.experiments.runner --n 4 --depths 4 8 12 16 --per_depth 10 --heuristic manhattan --timeout_sec 30 --out results/p15_manhattan.csv")
    run("Summary", f"{PY} -m astar_tiles.experiments.analyze results/p8.csv --out results/p8_summary.csv")
    run("Plots", f"{PY} -m astar_tiles.experiments.plot results/p8.csv --log --save results/plots")

if __name__ == "__main__":
    main()
