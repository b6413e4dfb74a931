#!/usr/bin/env python3
"""Generate (or load) a spiral N-puzzle and print its A* solution step by step."""
from __future__ import annotations
import argparse, sys
from pathlib import Path
from typing import List, Optional, Tuple

from src.domains.board import (
    InvalidSizeError, MalformedBoardError, check_size, is_solvable, parse_puzzle, render_board,
)
from src.domains.spiral import DEFAULT_ITERATIONS, DEFAULT_SOLVABLE, build_goal, scramble
from src.search.a_star import TIE_BREAKS, a_star

EPILOG = """\
Example usage:
  %(prog)s 5            Create a 5x5 solvable puzzle with 20 iterations.
  %(prog)s 4 false      Create a 4x4 unsolvable puzzle with 20 iterations.
  %(prog)s 6 true 30    Create a 6x6 solvable puzzle with 30 iterations.
  %(prog)s --file p.txt Solve a puzzle written by npuzzle_gen.
"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Spiral N-puzzle generator + A* solver (Manhattan distance).",
        epilog=EPILOG, formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("size", type=int, nargs="?", help="Board side length (>= 3)")
    ap.add_argument("extra", nargs="*", metavar="ARG",
                    help="'true'/'false' (default true) and a scramble iteration count (default 20)")
    ap.add_argument("--file", type=Path, default=None, help="Solve the puzzle stored in this file")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the scramble")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="h")
    ap.add_argument("--max_expanded", type=int, default=None, help="Give up after this many expansions")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Give up after this wall time")
    ap.add_argument("--parity_check", action="store_true",
                    help="Report unsolvable boards without searching")
    ap.add_argument("--frames", type=Path, default=None, help="Save one PNG per solution step here")
    return ap


def parse_extra(ap: argparse.ArgumentParser, extra: List[str]) -> Tuple[bool, int]:
    solvable = DEFAULT_SOLVABLE
    iterations = DEFAULT_ITERATIONS
    for tok in extra:
        if tok in ("true", "false"):
            solvable = tok == "true"
        elif tok.isdecimal():
            iterations = int(tok)
        else:
            ap.error(f"unrecognized argument {tok!r} (expected true, false or an iteration count)")
    return solvable, iterations


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.size is None and args.file is None:
        ap.print_help()
        return 0

    if args.file is not None and (args.size is not None or args.extra or args.seed is not None):
        ap.error("--file can't be combined with size, solvable, iterations or --seed")

    try:
        if args.file is not None:
            n, start = parse_puzzle(args.file.read_text())
        else:
            solvable, iterations = parse_extra(ap, args.extra)
            n = check_size(args.size)
            start = scramble(n, solvable=solvable, iterations=iterations, seed=args.seed)
    except (InvalidSizeError, MalformedBoardError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    goal = build_goal(n)
    print("Initial Puzzle:")
    print(render_board(start, n))
    print()

    if args.parity_check and not is_solvable(start, goal, n):
        print("No solution found! (parity check)")
        return 0

    res = a_star(start, goal, n, tie_break=args.tie_break,
                 max_expanded=args.max_expanded, timeout_sec=args.timeout_sec)
    path = res["path"]
    if path is None:
        if res["termination"] == "exhausted":
            print("No solution found!")
        else:
            print(f"Search stopped ({res['termination']}) after {res['expanded']} expansions.")
        return 0

    print("Solution Steps:")
    for step in path:
        print(render_board(step, n))
        print()
    print(f"Solved in {res['g']} moves ({res['expanded']} expanded, {res['time']:.3f}s)")

    if args.frames is not None:
        from src.experiments.visualize_path import save_path_frames
        save_path_frames(path, n, args.frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
