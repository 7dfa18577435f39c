import numbers
import random
from enum import Enum
from typing import Iterable, Iterator, Sequence

# Values a newly inserted tile can take, drawn with equal probability.
SPAWN_VALUES = (1, 2)


class End(Enum):
    """Destination wall of a swipe: index 0 (LEFT) or index N-1 (RIGHT)."""

    LEFT = "left"
    RIGHT = "right"


def wall_order(length: int, end: End) -> list[int]:
    """Cell indices ordered from the `end` wall outward."""
    if end is End.LEFT:
        return list(range(length))
    return list(range(length - 1, -1, -1))


def compact(cells, order: Sequence[int]) -> None:
    """
    Pack the tiles of `cells` against the wall at `order[0]`, keeping their
    relative order and emptying the remainder.

    `cells` is anything indexable with `[]` and assignable, so a row's list
    and a grid column view go through the same code.
    """
    collected = [cells[i] for i in order if cells[i] is not None]
    for k, i in enumerate(order):
        cells[i] = collected[k] if k < len(collected) else None


def merge(cells, order: Sequence[int]) -> None:
    """
    Merge equal neighbours, scanning pairs from the wall outward.

    The cell nearer the wall doubles and the other one empties, so the
    next pair starts at an empty cell and a fresh merge result never merges
    again in the same pass.
    """
    for a, b in zip(order, order[1:]):
        value = cells[a]
        if value is not None and value == cells[b]:
            cells[a] = value * 2
            cells[b] = None


def slide(cells, order: Sequence[int]) -> None:
    compact(cells, order)
    merge(cells, order)
    compact(cells, order)


def positive_size(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise ValueError(f"Invalid {name}: {value!r}. Must be an integer of at least 1")
    return int(value)


def _tile(value) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise ValueError(f"Invalid tile value: {value!r}. Must be a positive integer or None")
    return int(value)


class Line:
    """Fixed-length row of cells; an empty cell holds None."""

    _cells: list[int | None]

    def __init__(self, length: int):
        self._cells = [None] * positive_size(length, "line length")

    @classmethod
    def from_cells(cls, cells: Iterable[int | None]) -> "Line":
        values = [_tile(v) for v in cells]
        line = cls(len(values))
        line._cells = values
        return line

    @property
    def cells(self) -> tuple[int | None, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[int | None]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> int | None:
        return self._cells[index]

    def __setitem__(self, index: int, value: int | None):
        self._cells[index] = _tile(value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Line({self._cells!r})"

    def __str__(self) -> str:
        return str(self._cells)

    def compact_toward(self, end: End):
        compact(self._cells, wall_order(len(self._cells), end))

    def merge_toward(self, end: End):
        merge(self._cells, wall_order(len(self._cells), end))

    def swipe(self, end: End):
        """Compact, merge, then compact again toward `end`."""
        slide(self._cells, wall_order(len(self._cells), end))

    def swipe_left(self):
        self.swipe(End.LEFT)

    def swipe_right(self):
        self.swipe(End.RIGHT)

    def is_insertable(self) -> bool:
        return None in self._cells

    def empty_count(self) -> int:
        return self._cells.count(None)

    def insert_random(self, rng=None) -> bool:
        """
        Put a 1 or a 2 into a uniformly chosen empty cell.

        Indices are drawn with `rng.randrange` until one lands on an empty
        cell. `rng` defaults to the `random` module. Returns False, leaving
        the line untouched, when there is no empty cell.
        """
        if not self.is_insertable():
            return False
        if rng is None:
            rng = random

        while True:
            index = rng.randrange(len(self._cells))
            if self._cells[index] is None:
                break
        self._cells[index] = SPAWN_VALUES[rng.randrange(len(SPAWN_VALUES))]
        return True

    def clone(self) -> "Line":
        line = Line(len(self._cells))
        line._cells = self._cells[:]
        return line

    def print(self):
        print(self._cells)
