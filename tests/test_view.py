import random
import re

from sortscope.algorithms import QuickSort
from sortscope.model import Model
from sortscope.view import render, render_complexity

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def make_model(width=125, height=40):
    model = Model(rng=random.Random(3))
    model.resize(width, height)
    return model


def test_complexity_table_layout():
    complexity = QuickSort.complexity
    lines = plain(render_complexity(complexity, 58)).split("\n")
    assert len(lines) == 7
    assert all(len(line) == (58 // 4) * 4 for line in lines)
    assert "Time" in lines[1] and "Space" in lines[1]
    assert all(word in lines[3] for word in ("Best", "Avg", "Worst"))
    for value in (complexity.time_best, complexity.time_avg, complexity.time_worst, complexity.space_worst):
        assert value in lines[5]


def test_screen_fills_terminal():
    model = make_model()
    lines = plain(render(model)).split("\n")
    assert len(lines) == model.height
    assert all(len(line) == model.width + 1 for line in lines)


def test_screen_shows_menu_and_sections():
    model = make_model()
    text = plain(render(model))
    for sorter in model.sorters:
        assert sorter.name in text
    assert "Information" in text
    assert "Visualisation" in text
    assert "Complexity:" in text


def test_screen_shows_every_bar():
    model = make_model()
    text = plain(render(model))
    for item in model.items:
        assert item.bar in text


def test_focus_is_highlighted():
    model = make_model()
    model.handle_key("down")
    output = render(model)
    assert "\x1b[48;2;85;98;143m" + model.sorters[1].name in output
    assert "\x1b[48;2;85;98;143m" + model.sorters[0].name not in output


def test_selection_changes_description():
    model = make_model()
    model.handle_key("down")
    model.handle_key("enter")
    text = plain(render(model))
    assert model.sorters[model.selected].description.split(",")[0] in text


def test_unsized_model_renders_consistent_box():
    lines = plain(render(Model())).split("\n")
    assert len({len(line) for line in lines}) == 1