"""Rendering of the model as coloured terminal text."""

from __future__ import annotations

import re
import textwrap

from sortscope.items import Complexity, Item
from sortscope.model import Model

RESET = "\x1b[0m"
SELECTED_FG = "\x1b[38;2;85;98;143m"
SELECTED_BG = "\x1b[48;2;85;98;143m"
SUBTLE_FG = "\x1b[38;2;56;56;56m"

_ANSI = re.compile(r"\x1b\[[0-9;]*m")
_ANSI_SPLIT = re.compile(r"(\x1b\[[0-9;]*m)")


def _paint(text: str, code: str | None) -> str:
    return f"{code}{text}{RESET}" if code and text else text


def _width(text: str) -> int:
    return len(_ANSI.sub("", text))


def _fit(text: str, width: int) -> str:
    """Cut or pad ``text`` to exactly ``width`` visible cells."""
    width = max(width, 0)
    out: list[str] = []
    used = 0
    styled = False
    for part in _ANSI_SPLIT.split(text):
        if _ANSI.fullmatch(part):
            out.append(part)
            styled = True
            continue
        taken = part[: width - used]
        out.append(taken)
        used += len(taken)
    result = "".join(out)
    if styled and not result.endswith(RESET):
        result += RESET
    return result + " " * (width - used)


def _wrap(text: str, width: int) -> list[str]:
    lines: list[str] = []
    for line in text.split("\n"):
        if width <= 0:
            lines.append("")
        elif _width(line) <= width:
            lines.append(line)
        elif _ANSI.search(line):
            lines.append(_fit(line, width))
        else:
            lines.extend(textwrap.wrap(line, width) or [""])
    return lines


def _block(
    text: str, width: int, *, align: str = "left", style: str | None = None
) -> list[str]:
    lines = []
    for line in _wrap(text, width):
        if align == "center":
            line = " " * max((width - _width(line)) // 2, 0) + line
        lines.append(_paint(_fit(line, width), style))
    return lines


def _panel(lines: list[str], width: int, height: int, pad: int = 1) -> list[str]:
    inner = max(width - 2 * pad, 0)
    body = [" " * pad + _fit(line, inner) + " " * pad for line in lines]
    body.extend([" " * max(width, 0)] * (height - len(body)))
    return body


def _border(
    lines: list[str],
    *,
    top: bool = False,
    right: bool = False,
    bottom: bool = False,
    left: bool = False,
    rounded: bool = False,
) -> list[str]:
    width = max((_width(line) for line in lines), default=0)
    top_left, top_right, bottom_left, bottom_right = "╭╮╰╯" if rounded else "┌┐└┘"
    side = _paint("│", SUBTLE_FG)

    def edge(left_corner: str, right_corner: str) -> str:
        return _paint(
            (left_corner if left else "") + "─" * width + (right_corner if right else ""),
            SUBTLE_FG,
        )

    body = [
        (side if left else "") + _fit(line, width) + (side if right else "")
        for line in lines
    ]
    return (
        ([edge(top_left, top_right)] if top else [])
        + body
        + ([edge(bottom_left, bottom_right)] if bottom else [])
    )


def _join_vertical(*blocks: list[str]) -> list[str]:
    lines = [line for block in blocks for line in block]
    width = max((_width(line) for line in lines), default=0)
    return [_fit(line, width) for line in lines]


def _join_horizontal(*blocks: list[str]) -> list[str]:
    height = max((len(block) for block in blocks), default=0)
    rows = [""] * height
    for block in blocks:
        width = max((_width(line) for line in block), default=0)
        padded = [_fit(line, width) for line in block] + [" " * width] * (height - len(block))
        rows = [row + line for row, line in zip(rows, padded)]
    return rows


def _values_line(items: list[Item]) -> str:
    parts = ["("]
    for position, item in enumerate(items):
        text = f"{item.value})" if position == len(items) - 1 else f"{item.value},"
        parts.append(_paint(text, SELECTED_FG) if item.focused else text)
    return "".join(parts)


def render_complexity(complexity: Complexity, width: int) -> str:
    """Render the time and space table for an algorithm within ``width`` cells."""
    column = max(width // 4, 0)

    def cell(text: str, cell_width: int = column, *, top: bool = False, style: str | None = None):
        line = _paint(_fit(" " + text, cell_width), style)
        return _border([line], top=top, bottom=True)

    row1 = _join_horizontal(cell("Time", column * 3, top=True), cell("Space", top=True))
    row2 = _join_horizontal(cell("Best"), cell("Avg"), cell("Worst"), cell("Worst"))
    row3 = _join_horizontal(
        cell(complexity.time_best, style=SELECTED_BG),
        cell(complexity.time_avg),
        cell(complexity.time_worst),
        cell(complexity.space_worst),
    )
    return "\n".join(_join_vertical(row1, row2, row3))


def render(model: Model) -> str:
    """Render the whole screen: menu, information and visualisation."""
    inner_width = max(model.width - 1, 0)
    inner_height = max(model.height - 2, 0)
    column = model.column_width
    sorter = model.sorters[model.selected]

    nav_inner = max(column - 2, 0)
    nav_title = _border(_block("Sort Algorithm", nav_inner), bottom=True)
    names: list[str] = []
    for position, candidate in enumerate(model.sorters):
        style = SELECTED_BG if position == model.focused else None
        names.extend(_block(candidate.name, nav_inner, style=style))
    nav = _border(_panel(_join_vertical(nav_title, names), column, inner_height), right=True)

    info_inner = max(column * 3 - 2, 0)
    info = _block("Information", info_inner)
    info_title = _border(_block(sorter.name, info_inner), top=True, bottom=True)
    description = _block(sorter.description + "\n\n", info_inner)
    complexity = ["Complexity: "] + render_complexity(sorter.complexity, info_inner).split("\n")
    main = _border(
        _panel(_join_vertical(info, info_title, description, complexity), column * 3, inner_height),
        right=True,
    )

    vis_inner = max(column * 2 - 2, 0)
    vis_title = _border(_block("Visualisation", vis_inner), bottom=True)
    gap = [" " * vis_inner]
    values = _block(_values_line(model.items), vis_inner, align="center")
    bars: list[str] = []
    for item in model.items:
        style = SELECTED_FG if item.focused else None
        bars.extend("  " + line for line in _block(item.bar, max(vis_inner - 2, 0), style=style))
    vis = _panel(_join_vertical(vis_title, gap, values, gap, bars), column * 2, inner_height)

    body = _join_horizontal(nav, main, vis)[:inner_height]
    body = [_fit(line, inner_width) for line in body]
    body.extend([" " * inner_width] * (inner_height - len(body)))
    return "\n".join(_border(body, top=True, right=True, bottom=True, left=True, rounded=True))