"""Terminal front end: reads keys, steps the sort and redraws the screen."""

from __future__ import annotations

import argparse
import time

from blessed import Terminal

from sortscope.model import Model
from sortscope.view import render

_IDLE_POLL = 0.25

_NAMED_KEYS = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_ENTER": "enter",
    "KEY_ESCAPE": "esc",
}
_CHARACTER_KEYS = {"\x03": "ctrl+c", "\r": "enter", "\n": "enter"}


def key_name(keystroke) -> str:
    """Return the model's name for a key press read from the terminal."""
    text = str(keystroke)
    if text in _CHARACTER_KEYS:
        return _CHARACTER_KEYS[text]
    name = getattr(keystroke, "name", None)
    if name in _NAMED_KEYS:
        return _NAMED_KEYS[name]
    if name and getattr(keystroke, "is_sequence", False):
        return name.lower().removeprefix("key_")
    return text


def _run(term: Terminal, model: Model) -> None:
    size = None
    next_step = 0.0
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        while True:
            current = (term.width, term.height)
            if current != size:
                size = current
                model.resize(*current)
            print(term.home + term.clear + render(model), end="", flush=True)

            timeout = max(0.0, next_step - time.monotonic()) if model.running else _IDLE_POLL
            keystroke = term.inkey(timeout=timeout)
            if keystroke:
                was_running = model.running
                if model.handle_key(key_name(keystroke)):
                    return
                if model.running and not was_running:
                    next_step = time.monotonic()

            if model.running and time.monotonic() >= next_step:
                model.advance()
                next_step = time.monotonic() + model.sorters[model.selected].interval


def main(argv=None) -> int:
    """Start the interactive sorting visualiser."""
    parser = argparse.ArgumentParser(
        prog="sortscope",
        description="Watch sorting algorithms work, step by step, in the terminal. "
        "Keys: up/down or j/k to move, enter to select, space to sort, r to shuffle, q to quit.",
    )
    parser.parse_args(argv)
    try:
        _run(Terminal(), Model())
    except KeyboardInterrupt:
        pass
    return 0