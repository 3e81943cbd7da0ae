"""State of the sorting visualiser and the rules for changing it."""

from __future__ import annotations

import copy
import random
from collections.abc import Iterator
from dataclasses import dataclass, field

from sortscope.algorithms import Snapshot, Sorter, default_sorters
from sortscope.items import Item, max_array_from_cells, random_items

COLUMN_COUNT = 6
MARGIN_VERTICAL = 0
MARGIN_HORIZONTAL = 1


@dataclass
class Model:
    """Everything the screen shows: the menu, the chosen algorithm and the items."""

    sorters: list[Sorter] = field(default_factory=default_sorters)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    width: int = 0
    height: int = 0
    column_width: int = 0
    selected: int = 0
    focused: int = 0
    running: bool = False
    ran: bool = False
    max_elements: int = 0
    items: list[Item] = field(default_factory=list)
    _working: list[Item] = field(default_factory=list, init=False, repr=False)
    _steps: Iterator[Snapshot] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.sorters:
            raise ValueError("at least one sorter is required")

    def resize(self, width: int, height: int) -> None:
        """Adapt to a terminal of the given size, refilling items if the columns change."""
        self.width = width - MARGIN_HORIZONTAL
        self.height = height - MARGIN_VERTICAL
        column_width = self.width // COLUMN_COUNT
        if column_width == self.column_width:
            return
        self.column_width = column_width
        max_cell = 2 * column_width - 2 - 2
        self.max_elements = max_array_from_cells(max_cell) if max_cell >= 1 else 0
        self.items = random_items(self.max_elements, self.rng)

    def randomise(self) -> None:
        """Shuffle in a fresh set of items and allow another run."""
        self.items = random_items(self.max_elements, self.rng)
        self.ran = False

    def handle_key(self, key: str) -> bool:
        """Apply a named key press. Return True if the key asks to quit."""
        if key in ("ctrl+c", "q"):
            return True
        if key == "enter":
            if not self.running:
                self.selected = self.focused
        elif key in ("down", "j"):
            if not self.running and self.focused < len(self.sorters) - 1:
                self.focused += 1
        elif key in ("up", "k"):
            if not self.running and self.focused > 0:
                self.focused -= 1
        elif key == "r":
            if not self.running:
                self.randomise()
        elif key == " ":
            if not self.running and not self.ran:
                self._start()
        return False

    def _start(self) -> None:
        self.running = True
        self._working = [copy.copy(item) for item in self.items]
        self._steps = self.sorters[self.selected].steps(self._working)

    def advance(self) -> bool:
        """Take one step of the running sort. Return True while it is still running."""
        if not self.running or self._steps is None:
            return False
        try:
            self.items = next(self._steps)
        except StopIteration:
            self.items = self._working
            self._steps = None
            self.running = False
            self.ran = True
            return False
        return True