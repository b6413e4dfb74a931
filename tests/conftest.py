"""Shared fixtures for the spiral N-puzzle tests."""

import random

import pytest

from src.domains.spiral import build_goal


@pytest.fixture
def goal3():
    """The 3x3 spiral goal: 1 2 3 / 8 0 4 / 7 6 5."""
    return build_goal(3)


@pytest.fixture
def goal4():
    return build_goal(4)


@pytest.fixture
def rng():
    """Seeded random source so scrambles are reproducible."""
    return random.Random(1234)
