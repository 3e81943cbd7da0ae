import random

import pytest

from sortscope.algorithms import default_sorters
from sortscope.items import max_array_from_cells
from sortscope.model import Model


def make_model(seed=7, width=125, height=40):
    model = Model(rng=random.Random(seed))
    model.resize(width, height)
    return model


def run_to_end(model):
    steps = 0
    while model.advance():
        steps += 1
        assert sorted(i.value for i in model.items) == list(range(1, model.max_elements + 1))
    return steps


def test_resize_fills_items_to_fit_columns():
    model = make_model()
    assert model.width == 124
    assert model.column_width == 124 // 6
    assert model.max_elements == max_array_from_cells(2 * model.column_width - 4)
    assert sorted(i.value for i in model.items) == list(range(1, model.max_elements + 1))


def test_resize_keeps_items_when_columns_unchanged():
    model = make_model()
    before = model.items
    model.resize(126, 30)
    assert model.items is before
    assert model.height == 30


def test_resize_tiny_terminal_has_no_items():
    model = make_model(width=14)
    assert model.items == []
    assert model.max_elements == 0


def test_empty_sorters_rejected():
    with pytest.raises(ValueError):
        Model(sorters=[])


@pytest.mark.parametrize("key", ["q", "ctrl+c"])
def test_quit_keys(key):
    assert make_model().handle_key(key) is True


def test_navigation_clamps_and_enter_selects():
    model = make_model()
    assert model.handle_key("up") is False
    assert model.focused == 0
    for _ in range(10):
        model.handle_key("j")
    assert model.focused == len(model.sorters) - 1
    model.handle_key("k")
    model.handle_key("enter")
    assert model.selected == len(model.sorters) - 2


def test_space_starts_and_locks_navigation():
    model = make_model()
    model.handle_key(" ")
    assert model.running
    model.handle_key("down")
    model.handle_key("enter")
    assert (model.focused, model.selected) == (0, 0)
    before = [i.value for i in model.items]
    model.handle_key("r")
    assert [i.value for i in model.items] == before


@pytest.mark.parametrize("index", range(len(default_sorters())))
def test_every_sorter_finishes_sorted(index):
    model = make_model(seed=index)
    for _ in range(index):
        model.handle_key("down")
    model.handle_key("enter")
    model.handle_key(" ")
    run_to_end(model)
    assert not model.running and model.ran
    assert [i.value for i in model.items] == list(range(1, model.max_elements + 1))
    assert not any(i.focused for i in model.items)


def test_cannot_rerun_until_randomised():
    model = make_model()
    model.handle_key(" ")
    run_to_end(model)
    model.handle_key(" ")
    assert not model.running
    model.handle_key("r")
    assert not model.ran
    model.handle_key(" ")
    assert model.running


def test_advance_when_idle_does_nothing():
    model = make_model()
    before = [i.value for i in model.items]
    assert model.advance() is False
    assert [i.value for i in model.items] == before