import random
from enum import Enum
from typing import Iterable, Sequence

from lib2048.line import End, Line, positive_size, slide, wall_order


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class _Column:
    """Cells at one column index across all rows, indexed top to bottom."""

    def __init__(self, rows: Sequence[Line], index: int):
        self._rows = rows
        self._index = index

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, j: int) -> int | None:
        return self._rows[j][self._index]

    def __setitem__(self, j: int, value: int | None):
        self._rows[j][self._index] = value


class Grid:
    """Square board of `size` rows, each a Line of `size` cells"""

    _rows: list[Line]
    _size: int

    def __init__(self, size: int):
        self._size = positive_size(size, "grid size")
        self._rows = [Line(self._size) for _ in range(self._size)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int | None]]) -> "Grid":
        lines = [Line.from_cells(row) for row in rows]
        if not lines:
            raise ValueError("Invalid grid: no rows given")
        size = len(lines)
        for i, line in enumerate(lines):
            if len(line) != size:
                raise ValueError(
                    f"Invalid grid: row {i} has {len(line)} cells, expected {size}"
                )
        grid = cls(size)
        grid._rows = lines
        return grid

    @property
    def size(self) -> int:
        return self._size

    @property
    def rows(self) -> tuple[Line, ...]:
        """Copies of the rows; changing them leaves the grid as it was."""
        return tuple(row.clone() for row in self._rows)

    def cell(self, row: int, col: int) -> int | None:
        return self._rows[row][col]

    def column(self, col: int) -> tuple[int | None, ...]:
        return tuple(row[col] for row in self._rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Grid({[list(row) for row in self._rows]!r})"

    def __str__(self) -> str:
        return "\n".join(str(row) for row in self._rows)

    def swipe_left(self):
        for row in self._rows:
            row.swipe_left()

    def swipe_right(self):
        for row in self._rows:
            row.swipe_right()

    def swipe_up(self):
        order = wall_order(self._size, End.LEFT)
        for i in range(self._size):
            slide(_Column(self._rows, i), order)

    def swipe_down(self):
        order = wall_order(self._size, End.RIGHT)
        for i in range(self._size):
            slide(_Column(self._rows, i), order)

    def swipe(self, direction: Direction | str):
        """
        Swipe the whole grid. Directions: left, right, up, down.
        """
        try:
            direction = Direction(direction)
        except ValueError:
            raise ValueError(
                f"Invalid direction: {direction!r}. Must be 'left', 'right', 'up', or 'down'"
            ) from None

        if direction is Direction.LEFT:
            self.swipe_left()
        elif direction is Direction.RIGHT:
            self.swipe_right()
        elif direction is Direction.UP:
            self.swipe_up()
        else:
            self.swipe_down()

    def is_insertable(self) -> bool:
        return any(row.is_insertable() for row in self._rows)

    def empty_count(self) -> int:
        return sum(row.empty_count() for row in self._rows)

    def insert_random(self, rng=None) -> bool:
        """
        Insert a 1 or a 2 into an empty cell.

        First a row is drawn uniformly until one with an empty cell comes
        up, then that row picks one of its own empty cells. Each insertable
        row is equally likely, so a cell in a row with few gaps is more
        likely to be chosen than one in a row with many.
        """
        if not self.is_insertable():
            return False
        if rng is None:
            rng = random

        while True:
            row = self._rows[rng.randrange(self._size)]
            if row.is_insertable():
                return row.insert_random(rng)

    def clone(self) -> "Grid":
        grid = Grid(self._size)
        grid._rows = [row.clone() for row in self._rows]
        return grid

    def print(self):
        for row in self._rows:
            row.print()
