from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from astar_tiles.domains.grid import State
from astar_tiles.domains.puzzlen import NPuzzle, make_unsolvable_variant
from astar_tiles.heuristics.strategy import Heuristic
from astar_tiles.search.a_star import a_star

HEADER = [
    "algorithm", "heuristic", "n", "depth", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_open", "peak_closed", "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    state: State


def generate_instances(dom: NPuzzle, depths: List[int], per_depth: int, start_seed: int = 0,
                       goal: Optional[State] = None) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = dom.scramble(d, seed, goal=goal)
            seed += 1
            attempts += 1
            if dom.is_solvable(s, goal):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out


def write_row(w, res, dom: NPuzzle, inst: Instance, solvable_flag: int):
    w.writerow([
        res.get("algorithm", ""), res.get("heuristic", ""), dom.N, inst.depth, inst.seed,
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time', 0.0):.6f}",
        res.get("peak_open", ""), res.get("peak_closed", ""),
        res.get("termination", "ok"), solvable_flag,
    ])


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A* N-puzzle experiment runner (misplaced vs Manhattan)")
    ap.add_argument("--heuristic", choices=["misplaced", "manhattan", "both"], default="both")
    ap.add_argument("--n", type=int, default=3, help="Board side (N×N)")
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12, 16])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run parity-flipped variants (pre-checked, no exhaustive search)")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    dom = NPuzzle(args.n)
    heuristics = list(Heuristic) if args.heuristic == "both" else [Heuristic.parse(args.heuristic)]

    insts = generate_instances(dom, args.depths, args.per_depth, start_seed=args.seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)
    goal = dom.GOAL.grid

    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for h in heuristics:
                r = a_star(inst.state.grid, goal, heuristic=h,
                           timeout_sec=args.timeout_sec, return_path=False)
                write_row(w, r, dom, inst, 1)
            if args.include_unsolvable:
                u = make_unsolvable_variant(inst.state)
                for h in heuristics:
                    r = a_star(u.grid, goal, heuristic=h, timeout_sec=args.timeout_sec,
                               check_solvable=True, return_path=False)
                    write_row(w, r, dom, inst, 0)

    print(f"Wrote {args.out} ({len(insts)} instances x {len(heuristics)} heuristic(s))")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
