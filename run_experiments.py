#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m src.experiments.npuzzle_gen 3 -s -i 200 --seed 7 > results/p3_solvable.txt")
    run("python -m src.experiments.npuzzle_gen 3 -u -i 200 --seed 7 > results/p3_unsolvable.txt")
    run("python -m src.experiments.npuzzle --file results/p3_solvable.txt")
    run("python -m src.experiments.npuzzle --file results/p3_unsolvable.txt --parity_check")
    run("python -m src.experiments.npuzzle 4 true 30 --seed 1")
    run("python -m src.experiments.visualize_path --n 3 --iterations 30 --seed 1 --outdir results/example_path")

if __name__ == "__main__":
    main()
