from __future__ import annotations
from typing import Iterable, List, Tuple

State = Tuple[int, ...]


class InvalidSizeError(ValueError):
    """Board side length below 3."""


class MalformedBoardError(ValueError):
    """Board does not hold exactly the tiles 0..n*n-1."""


class PuzzleFormatError(MalformedBoardError):
    """Text puzzle could not be read."""


MIN_SIZE = 3


def check_size(n: int) -> int:
    if n < MIN_SIZE:
        raise InvalidSizeError(f"Can't build a puzzle with size {n} (minimum is {MIN_SIZE}).")
    return n


def validate_board(state: Iterable[int], n: int) -> State:
    """Return state as a tuple, raising MalformedBoardError unless it is a permutation of 0..n*n-1."""
    s = tuple(state)
    if len(s) != n * n:
        raise MalformedBoardError(f"Board has {len(s)} tiles, expected {n * n} for size {n}.")
    if 0 not in s:
        raise MalformedBoardError("Board has no blank tile (0).")
    if sorted(s) != list(range(n * n)):
        raise MalformedBoardError(f"Board tiles must be exactly 0..{n * n - 1}, got {list(s)}.")
    return s


def _permutation_parity(perm: List[int]) -> int:
    """Parity (0 even, 1 odd) of a permutation of 0..k-1, by cycle decomposition."""
    seen = [False] * len(perm)
    parity = 0
    for i in range(len(perm)):
        if seen[i]:
            continue
        length = 0
        j = i
        while not seen[j]:
            seen[j] = True
            j = perm[j]
            length += 1
        parity ^= (length - 1) & 1
    return parity


def is_solvable(state: State, goal: State, n: int) -> bool:
    """
    True when state can reach goal by sliding the blank.
    Each move is one transposition and shifts the blank by one cell, so the
    parity of the permutation state->goal must match the parity of the
    blank's Manhattan displacement.
    """
    state = validate_board(state, n)
    goal = validate_board(goal, n)
    goal_idx = {t: i for i, t in enumerate(goal)}
    perm = [goal_idx[t] for t in state]
    zr, zc = divmod(state.index(0), n)
    gr, gc = divmod(goal_idx[0], n)
    blank_parity = (abs(zr - gr) + abs(zc - gc)) & 1
    return _permutation_parity(perm) == blank_parity


# ---------- text rendering ----------

def render_board(state: State, n: int) -> str:
    """Grid with blank as spaces and tiles right-aligned; one line per row."""
    width = len(str(n * n - 1))
    lines = []
    for r in range(n):
        cells = []
        for t in state[r * n:(r + 1) * n]:
            cells.append(" " * width if t == 0 else f"{t:>{width}}")
        lines.append(" ".join(cells) + " ")
    return "\n".join(lines)


def format_puzzle(state: State, n: int, solvable: bool) -> str:
    width = len(str(n * n))
    out = [f"# This puzzle is {'solvable' if solvable else 'unsolvable'}", str(n)]
    for r in range(n):
        out.append(" ".join(f"{t:>{width}}" for t in state[r * n:(r + 1) * n]) + " ")
    return "\n".join(out) + "\n"


def parse_puzzle(text: str) -> Tuple[int, State]:
    """Read the text puzzle format: '#' comments, a size line, then n rows of n tiles."""
    rows: List[List[int]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        try:
            rows.append([int(tok) for tok in line.split()])
        except ValueError:
            raise PuzzleFormatError(f"line {lineno}: expected integers, got {raw.strip()!r}") from None
    if not rows:
        raise PuzzleFormatError("empty puzzle")
    if len(rows[0]) != 1:
        raise PuzzleFormatError("first line must hold the puzzle size only")
    n = rows[0][0]
    check_size(n)
    body = rows[1:]
    if len(body) != n:
        raise PuzzleFormatError(f"expected {n} rows, got {len(body)}")
    for i, row in enumerate(body):
        if len(row) != n:
            raise PuzzleFormatError(f"row {i + 1} has {len(row)} tiles, expected {n}")
    state = validate_board([t for row in body for t in row], n)
    return n, state
