import random

import pytest

from lib2048.grid import Grid
from lib2048.line import Line
from lib2048.rng import ScriptedSource


@pytest.fixture
def grid_from_rows():
    def _make(rows):
        return Grid.from_rows(rows)

    return _make


@pytest.fixture
def rows_of():
    """Plain nested lists of a grid's cells, for comparing against literals."""

    def _rows(grid):
        return [list(row) for row in grid.rows]

    return _rows


@pytest.fixture
def scripted():
    def _make(*values):
        return ScriptedSource(values)

    return _make


@pytest.fixture
def random_line():
    """Lines of random length with a mix of gaps and small powers of two."""

    def _make(rng: random.Random, length: int | None = None):
        if length is None:
            length = rng.randint(1, 8)
        cells = [rng.choice([None, None, 1, 2, 2, 4, 8]) for _ in range(length)]
        return Line.from_cells(cells)

    return _make
