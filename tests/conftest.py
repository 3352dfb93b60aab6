"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sceneboard.context import BoardContext
from sceneboard.core.path import Path
from sceneboard.core.point import Point

# Counterclockwise unit square, closed
UNIT_SQUARE = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]

# Open L-shaped path with a right-angle turn at (10, 0)
L_PATH = [Point(0, 0), Point(10, 0), Point(10, 10)]

SEED = 1234


@pytest.fixture
def unit_square() -> Path:
    return Path(UNIT_SQUARE, closed=True)


@pytest.fixture
def l_path() -> Path:
    return Path(L_PATH, closed=False)


@pytest.fixture
def seeded_context() -> BoardContext:
    ctx = BoardContext()
    ctx.seed(SEED)
    return ctx
