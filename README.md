# sortscope

sortscope is a full-screen terminal program for watching sorting algorithms
work. Pick an algorithm and press space. The program then sorts a shuffled
list of the numbers 1 to n in front of you. Each element appears as a number
and as a horizontal bar, and the element being moved is highlighted while the
sort runs.

It offers insertion sort, bubble sort, selection sort, merge sort and
quicksort. Insertion, bubble and selection sort come with a short description.
A complexity table (best, average and worst time, worst-case space) is shown
for every sorter; merge sort's table is empty, and merge sort and quicksort
have no description text.

## Installation

```
pip install .
```

## Running

```
sortscope
```

`sortscope --help` prints a short summary of the keys. The program takes no
other options.

The screen has three columns:

- **Sort Algorithm**: the list of available sorters.
- **Information**: the description and complexity table of the selected sorter.
- **Visualisation**: the current list and its bars.

The size of the list follows the width of the terminal. A wider window gives
more elements to sort.

Insertion, bubble and selection sort redraw after every swap or comparison,
merge sort after every element it places. Quicksort sorts in one go and
shows only the finished list.

## Keys

| Key              | Action                                               |
|------------------|------------------------------------------------------|
| `j` / down arrow | Move the highlight down the list of sorters          |
| `k` / up arrow   | Move the highlight up the list of sorters            |
| enter            | Select the highlighted sorter                        |
| space            | Start sorting (once per shuffle)                     |
| `r`              | Shuffle the list again                               |
| `q` / ctrl+c     | Quit                                                 |

Moving, selecting, shuffling and starting are ignored while a sort is running;
quitting always works.

## Using the pieces from Python

The sorting steps do not depend on the terminal:

```python
import random

from sortscope.items import random_items
from sortscope.algorithms import default_sorters

for sorter in default_sorters():
    items = random_items(10, random.Random(1))
    for snapshot in sorter.steps(items):
        pass  # a copy of the list after each step
    print(sorter.name, [item.value for item in items])
```

`Sorter.steps(items)` sorts the list in place and yields a copy of it after
each step.

`sortscope.items.max_array_from_cells(width)` returns how many
comma-separated integers, counting up from 1, fit in `width` character cells.
For example, `max_array_from_cells(10)` is `5`. It raises `ValueError` when
`width` is less than 1.

`sortscope.model.Model` holds the screen state. `resize`, `handle_key`,
`randomise` and `advance` change it, and `sortscope.view.render(model)`
turns it into terminal text.

## Tests

```
pip install .[test]
pytest
```