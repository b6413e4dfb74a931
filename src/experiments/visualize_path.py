#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Tuple

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from src.domains.spiral import build_goal, scramble
from src.search.a_star import a_star

State = Tuple[int, ...]

def draw_board(state: State, n: int, out_path: Path):
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    # tiles
    fontsize = 16 if n <= 4 else max(6, 64 // n)
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=fontsize)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def save_path_frames(path: List[State], n: int, outdir: Path) -> List[Path]:
    outdir = Path(outdir)
    written = []
    for i, s in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(s, n, p)
        written.append(p)
    print(f"Saved {len(written)} frames to {outdir}")
    return written

def main():
    p = argparse.ArgumentParser(description="Solve one spiral puzzle and save board images along the path.")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--iterations", type=int, default=20)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--max_expanded", type=int, default=None)
    p.add_argument("--outdir", default="results/example_path")
    args = p.parse_args()

    start = scramble(args.n, solvable=True, iterations=args.iterations, seed=args.seed)
    res = a_star(start, build_goal(args.n), args.n, max_expanded=args.max_expanded)

    if not res.get("path"):
        print(f"No path ({res['termination']}). Try fewer iterations.")
        return

    save_path_frames(res["path"], args.n, Path(args.outdir))

if __name__ == "__main__":
    main()
