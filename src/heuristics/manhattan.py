from typing import Callable, Dict, Tuple

State = Tuple[int, ...]


def goal_positions(goal: State, n: int) -> Dict[int, Tuple[int, int]]:
    return {t: divmod(i, n) for i, t in enumerate(goal)}


def manhattan(s: State, goal: State, n: int) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    return make_manhattan(goal, n)(s)


def make_manhattan(goal: State, n: int) -> Callable[[State], int]:
    """Manhattan heuristic bound to one goal; goal positions are computed once."""
    _goal_pos = goal_positions(goal, n)

    def h(s: State) -> int:
        dist = 0
        for idx, tile in enumerate(s):
            if tile == 0:
                continue
            r, c = divmod(idx, n)
            gr, gc = _goal_pos[tile]
            dist += abs(r - gr) + abs(c - gc)
        return dist

    return h
