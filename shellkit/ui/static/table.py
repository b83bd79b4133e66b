#!/usr/bin/env python3
# shellkit/ui/static/table.py
from __future__ import annotations

from typing import Optional, Sequence

from shellkit.ui.utils import strip_ansi


def _visible_len(cell: str) -> int:
    return len(strip_ansi(cell))


def _column_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    """Widest visible cell per column; ragged rows are allowed."""
    widths: list[int] = []
    for row in rows:
        for index, cell in enumerate(row):
            if index == len(widths):
                widths.append(0)
            widths[index] = max(widths[index], _visible_len(cell))
    return widths


def format_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    padding: int = 1,
    border: bool = True,
    indent: int = 0,
) -> str:
    """
    Render rows as an aligned table and return it as one string.

    Widths ignore ANSI sequences, so painted cells line up. ``border=False``
    gives the compact layout used by ``help``: columns separated by two pad
    widths, no trailing spaces, every line prefixed by ``indent`` spaces.
    """
    body = [[str(cell) for cell in row] for row in rows]
    head = [str(cell) for cell in headers] if headers is not None else None
    widths = _column_widths(([head] if head else []) + body)
    if not widths:
        return ""

    pad = " " * padding

    def fit(cell: str, index: int) -> str:
        return cell + " " * (widths[index] - _visible_len(cell))

    def boxed(row: Sequence[str]) -> str:
        return "|" + "|".join(f"{pad}{fit(cell, i)}{pad}" for i, cell in enumerate(row)) + "|"

    def compact(row: Sequence[str]) -> str:
        cells = [fit(cell, i) for i, cell in enumerate(row[:-1])] + list(row[-1:])
        return " " * indent + (pad * 2).join(cells)

    render = boxed if border else compact
    lines = [render(row) for row in ([head, ["-" * w for w in widths]] if head else []) + body]

    if border:
        rule = "-" * (sum(widths) + len(widths) * (2 * padding + 1) + 1)
        lines = [rule, *lines, rule]
    return "\n".join(lines)
