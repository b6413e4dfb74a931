#!/usr/bin/env python3
"""Print a scrambled spiral N-puzzle in the text puzzle format."""
from __future__ import annotations
import argparse, random, sys
from typing import List, Optional

from src.domains.board import InvalidSizeError, check_size, format_puzzle
from src.domains.spiral import scramble

GEN_DEFAULT_ITERATIONS = 10000


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate a spiral N-puzzle.")
    ap.add_argument("size", type=int, help="Board side length (>= 3)")
    ap.add_argument("-s", "--solvable", action="store_true", help="Force a solvable puzzle")
    ap.add_argument("-u", "--unsolvable", action="store_true", help="Force an unsolvable puzzle")
    ap.add_argument("-i", "--iterations", type=int, default=GEN_DEFAULT_ITERATIONS)
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args(argv)

    if args.solvable and args.unsolvable:
        print("error: can't be both solvable and unsolvable", file=sys.stderr)
        return 1
    if args.iterations < 0:
        print("error: iterations must be >= 0", file=sys.stderr)
        return 1
    try:
        n = check_size(args.size)
    except InvalidSizeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    if args.solvable:
        solv = True
    elif args.unsolvable:
        solv = False
    else:
        solv = rng.choice([True, False])

    puzzle = scramble(n, solvable=solv, iterations=args.iterations, rng=rng)
    sys.stdout.write(format_puzzle(puzzle, n, solv))
    return 0


if __name__ == "__main__":
    sys.exit(main())
