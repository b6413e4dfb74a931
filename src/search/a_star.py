from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set, Tuple
import heapq
from time import perf_counter
import itertools

from src.domains.board import validate_board
from src.domains.spiral import blank_moves
from src.heuristics.manhattan import make_manhattan

State = Tuple[int, ...]

TIE_BREAKS = ("h", "g", "fifo", "lifo")


@dataclass
class PQItem:
    f: int
    h: int
    g: int
    state: State
    blank: int
    parent: Optional["PQItem"] = None


def reconstruct_path(node: Optional[PQItem]) -> List[State]:
    path: List[State] = []
    while node is not None:
        path.append(node.state)
        node = node.parent
    path.reverse()
    return path


def successors(state: State, z: int, n: int) -> List[Tuple[State, int]]:
    """(next_state, new_blank_index) for every legal blank swap."""
    out: List[Tuple[State, int]] = []
    for j in blank_moves(z, n):
        lst = list(state)
        lst[z], lst[j] = lst[j], lst[z]
        out.append((tuple(lst), j))
    return out


def a_star(
    start: Iterable[int],
    goal: Iterable[int],
    n: int,
    tie_break: str = "h",
    return_path: bool = True,
    max_expanded: int | None = None,
    timeout_sec: float | None = None,
):
    """
    A* with Manhattan distance and instrumentation.
    A successor is dropped when its board is closed, or when the frontier
    already holds the same board with g <= its g.
    termination is one of "ok", "exhausted", "budget", "timeout".
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")
    start = validate_board(start, n)
    goal = validate_board(goal, n)
    hfun = make_manhattan(goal, n)
    t0 = perf_counter()

    open_heap: List[Tuple[Tuple[int, int, int], int, PQItem]] = []
    counter = itertools.count()

    def priority_tuple(f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
        if tie_break == "h":   return (f, h, ctr)
        if tie_break == "g":   return (f, -g, ctr)
        if tie_break == "fifo":return (f, 0,  ctr)
        return (f, 0, -ctr)

    def result(termination: str, node: Optional[PQItem] = None):
        return {
            "path": reconstruct_path(node) if (node is not None and return_path) else None,
            "g": node.g if node is not None else None,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "peak_open": peak_open,
            "peak_closed": peak_closed,
            "time": perf_counter() - t0,
            "algorithm": "A*",
            "tie_break": tie_break,
            "termination": termination,
        }

    h0 = hfun(start)
    start_item = PQItem(f=h0, h=h0, g=0, state=start, blank=start.index(0), parent=None)
    heapq.heappush(open_heap, (priority_tuple(h0, 0, h0, next(counter)), next(counter), start_item))

    open_g: Dict[State, int] = {start: 0}
    closed: Set[State] = set()

    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1
    peak_closed = 0

    while open_heap:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return result("timeout")

        peak_open = max(peak_open, len(open_heap))
        _, _, node = heapq.heappop(open_heap)
        if node.state in closed:
            continue

        if node.h == 0:
            return result("ok", node)

        if max_expanded is not None and expanded >= max_expanded:
            return result("budget")

        closed.add(node.state)
        expanded += 1
        peak_closed = max(peak_closed, len(closed))

        g2 = node.g + 1
        for s2, z2 in successors(node.state, node.blank, n):
            generated += 1
            if s2 in closed:
                duplicates += 1
                continue
            known = open_g.get(s2)
            if known is not None and known <= g2:
                duplicates += 1
                continue
            open_g[s2] = g2
            h2 = hfun(s2)
            f2 = g2 + h2
            child = PQItem(f=f2, h=h2, g=g2, state=s2, blank=z2, parent=node)
            heapq.heappush(open_heap, (priority_tuple(f2, g2, h2, next(counter)), next(counter), child))

    # Open exhausted without finding goal
    return result("exhausted")


def solve(start: Iterable[int], goal: Iterable[int], size: int) -> Optional[List[State]]:
    """Optimal list of boards from start to goal inclusive, or None when unreachable."""
    return a_star(start, goal, size)["path"]
