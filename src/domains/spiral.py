from __future__ import annotations
from typing import Optional, Tuple
import random

from src.domains.board import State, check_size

DEFAULT_ITERATIONS = 20
DEFAULT_SOLVABLE = True


def build_goal(n: int) -> State:
    """
    Spiral (snail) goal layout for an n×n board:
        1 2 3
        8 0 4
        7 6 5
    Filled clockwise from the top-left corner; the blank takes the last cell.
    """
    check_size(n)
    total = n * n
    grid = [-1] * total
    x, y = 0, 0      # column, row
    dx, dy = 1, 0
    cur = 1
    while True:
        grid[x + y * n] = cur
        if cur == 0:
            break
        cur += 1
        nx, ny = x + dx, y + dy
        if nx == n or nx < 0 or (dx != 0 and grid[nx + y * n] != -1):
            dx, dy = 0, dx
        elif ny == n or ny < 0 or (dy != 0 and grid[x + ny * n] != -1):
            dx, dy = -dy, 0
        x += dx
        y += dy
        if cur == total:
            cur = 0
    if -1 in grid:
        raise RuntimeError(f"spiral left cells unfilled for size {n}")
    return tuple(grid)


def blank_moves(z: int, n: int) -> Tuple[int, ...]:
    """Indices the blank at z may swap with, in left/right/up/down order."""
    moves = []
    if z % n > 0:         moves.append(z - 1)
    if z % n < n - 1:     moves.append(z + 1)
    if z >= n:            moves.append(z - n)
    if z + n < n * n:     moves.append(z + n)
    return tuple(moves)


def scramble(
    n: int,
    solvable: bool = DEFAULT_SOLVABLE,
    iterations: int = DEFAULT_ITERATIONS,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> State:
    """Random walk of `iterations` blank swaps from the spiral goal.

    With solvable=False one extra swap of two non-blank tiles moves the board
    into the parity class that cannot reach the goal. Pass either seed or rng.
    """
    if seed is not None and rng is not None:
        raise ValueError("pass seed or rng, not both")
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")
    rng = rng or random.Random(seed)
    lst = list(build_goal(n))
    for _ in range(iterations):
        z = lst.index(0)
        j = rng.choice(blank_moves(z, n))
        lst[z], lst[j] = lst[j], lst[z]

    if not solvable:
        if lst[0] == 0 or lst[1] == 0:
            lst[-1], lst[-2] = lst[-2], lst[-1]
        else:
            lst[0], lst[1] = lst[1], lst[0]
    return tuple(lst)

