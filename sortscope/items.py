"""Items shown in the visualisation and the helpers that build them."""

from __future__ import annotations

import random
from dataclasses import dataclass

ICON = "\u25a0"
TIME_INTERVAL = 0.1  # seconds between visualisation steps


@dataclass
class Item:
    """One value being sorted, with its rendered bar."""

    value: int
    bar: str
    focused: bool = False
    index: int = 0


@dataclass(frozen=True)
class Complexity:
    """Big-O figures shown for an algorithm."""

    time_best: str = ""
    time_avg: str = ""
    time_worst: str = ""
    space_worst: str = ""


def max_array_from_cells(max_cell: int) -> int:
    """Return how many numbers 1, 2, 3, ... fit, comma separated, in ``max_cell`` cells.

    Numbers and commas are added alternately until the text reaches
    ``max_cell`` characters; a trailing comma is dropped.
    """
    if max_cell < 1:
        raise ValueError(f"max_cell must be at least 1, got {max_cell}")
    length = 0
    count = 1
    expecting_number = True
    while length < max_cell:
        if expecting_number:
            length += len(str(count))
            count += 1
        else:
            length += 1
        expecting_number = not expecting_number
    return count - 1


def make_bar(size: int) -> str:
    """Render a bar: the number left-aligned in three cells, then ``2 * size`` icons."""
    return f"{size:<3}" + ICON * (size * 2)


def random_items(size: int, rng: random.Random | None = None) -> list[Item]:
    """Return the values 1..size in random order as items."""
    rng = rng or random.Random()
    values = rng.sample(range(1, size + 1), size)
    return [
        Item(value=value, bar=make_bar(value), focused=False, index=position)
        for position, value in enumerate(values)
    ]