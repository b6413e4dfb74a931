import random

import pytest

from src.domains.board import InvalidSizeError, is_solvable
from src.domains.spiral import blank_moves, build_goal, scramble


def spiral_order(n):
    """Cell indices in clockwise spiral order from the top-left corner."""
    top, bottom, left, right = 0, n - 1, 0, n - 1
    order = []
    while top <= bottom and left <= right:
        order += [top * n + c for c in range(left, right + 1)]
        order += [r * n + right for r in range(top + 1, bottom + 1)]
        if top < bottom:
            order += [bottom * n + c for c in range(right - 1, left - 1, -1)]
        if left < right:
            order += [r * n + left for r in range(bottom - 1, top, -1)]
        top, bottom, left, right = top + 1, bottom - 1, left + 1, right - 1
    return order


def test_goal_3x3(goal3):
    assert goal3 == (1, 2, 3, 8, 0, 4, 7, 6, 5)


def test_goal_4x4():
    assert build_goal(4) == (
        1, 2, 3, 4,
        12, 13, 14, 5,
        11, 0, 15, 6,
        10, 9, 8, 7,
    )


@pytest.mark.parametrize("n", [3, 4, 5, 6, 7, 8, 9, 10])
def test_goal_is_permutation_laid_out_in_spiral(n):
    goal = build_goal(n)
    assert sorted(goal) == list(range(n * n))
    order = spiral_order(n)
    assert [goal[i] for i in order] == list(range(1, n * n)) + [0]


def test_goal_is_pure():
    assert build_goal(5) == build_goal(5)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_goal_rejects_small_sizes(n):
    with pytest.raises(InvalidSizeError):
        build_goal(n)


def test_blank_moves_bounds():
    assert blank_moves(0, 3) == (1, 3)
    assert blank_moves(4, 3) == (3, 5, 1, 7)
    assert blank_moves(8, 3) == (7, 5)


def test_scramble_zero_iterations_is_goal(goal3):
    assert scramble(3, True, 0) == goal3


def test_scramble_keeps_tiles(rng):
    s = scramble(4, True, 200, rng=rng)
    assert sorted(s) == list(range(16))


def test_scramble_seed_is_reproducible():
    assert scramble(4, True, 50, seed=9) == scramble(4, True, 50, seed=9)


@pytest.mark.parametrize("n", [3, 4, 5])
@pytest.mark.parametrize("iterations", [0, 1, 7, 100])
def test_scramble_solvability_class(n, iterations):
    goal = build_goal(n)
    rng = random.Random(n * 100 + iterations)
    assert is_solvable(scramble(n, True, iterations, rng=rng), goal, n)
    assert not is_solvable(scramble(n, False, iterations, rng=rng), goal, n)


def test_unsolvable_swaps_first_two_cells(goal3):
    s = scramble(3, False, 0)
    assert s == (2, 1, 3, 8, 0, 4, 7, 6, 5)


def test_unsolvable_swaps_last_two_when_blank_in_front():
    class Scripted:
        """Moves the blank to the listed cells in turn."""
        def __init__(self, cells):
            self.cells = list(cells)

        def choice(self, seq):
            cell = self.cells.pop(0)
            assert cell in seq
            return cell

    # centre blank moves up into cell 1
    s = scramble(3, True, 1, rng=Scripted([1]))
    assert s == (1, 0, 3, 8, 2, 4, 7, 6, 5)
    u = scramble(3, False, 1, rng=Scripted([1]))
    assert u == (1, 0, 3, 8, 2, 4, 7, 5, 6)


def test_scramble_rejects_bad_arguments():
    with pytest.raises(InvalidSizeError):
        scramble(2, True, 10)
    with pytest.raises(ValueError):
        scramble(3, True, -1)


def test_scramble_rejects_seed_with_rng(rng):
    with pytest.raises(ValueError):
        scramble(3, True, 5, seed=1, rng=rng)
