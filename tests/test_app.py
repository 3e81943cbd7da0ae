import pytest
from blessed.keyboard import Keystroke

from sortscope.app import key_name, main
from sortscope.model import Model


@pytest.mark.parametrize(
    "keystroke, expected",
    [
        (Keystroke("q"), "q"),
        (Keystroke("j"), "j"),
        (Keystroke(" "), " "),
        (Keystroke("\x03"), "ctrl+c"),
        (Keystroke("\r"), "enter"),
        (Keystroke("\x1b[A", code=259, name="KEY_UP"), "up"),
        (Keystroke("\x1b[B", code=258, name="KEY_DOWN"), "down"),
        (Keystroke("\x1bOM", code=343, name="KEY_ENTER"), "enter"),
    ],
)
def test_key_name(keystroke, expected):
    assert key_name(keystroke) == expected


def test_key_name_accepts_plain_strings():
    assert key_name("k") == "k"
    assert key_name("\n") == "enter"


def test_key_names_drive_the_model():
    model = Model()
    model.resize(125, 40)
    model.handle_key(key_name(Keystroke("\x1b[B", code=258, name="KEY_DOWN")))
    model.handle_key(key_name(Keystroke("\r")))
    assert model.selected == 1
    assert model.handle_key(key_name(Keystroke("\x03"))) is True


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "sortscope" in capsys.readouterr().out