"""Laying out names in columns that fit the terminal width."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["ColumnLayout", "compute_layout", "format_columns", "terminal_width"]

_FALLBACK_WIDTH = 80


@dataclass(frozen=True)
class ColumnLayout:
    """A column-major arrangement of entries over a number of lines."""

    line_count: int
    column_count: int
    full_lines: int
    column_widths: tuple[int, ...]

    def columns_in_line(self, line_index: int) -> int:
        """Number of entries shown on line ``line_index``."""
        if line_index >= self.full_lines:
            return self.column_count - 1
        return self.column_count

    def entry_index(self, line_index: int, column_index: int) -> int:
        """Index of the entry shown at the given line and column."""
        return self.line_count * column_index + line_index


def _layout_for(widths: Sequence[int], line_count: int) -> ColumnLayout:
    count = len(widths)
    column_count = -(-count // line_count)
    full_lines = count % line_count or line_count
    column_widths = [0] * column_count
    for index, width in enumerate(widths):
        column = index // line_count
        column_widths[column] = max(column_widths[column], width)
    return ColumnLayout(line_count, column_count, full_lines, tuple(column_widths))


def compute_layout(widths: Sequence[int], term_width: int, min_space: int) -> ColumnLayout:
    """Find the fewest lines whose columns fit within ``term_width``.

    Each column is as wide as its widest entry plus ``min_space``. When no
    arrangement fits, every entry gets a line of its own.
    """
    if not widths:
        return ColumnLayout(0, 0, 0, ())
    layout = None
    for line_count in range(1, len(widths) + 1):
        layout = _layout_for(widths, line_count)
        total = sum(width + min_space for width in layout.column_widths)
        if total <= term_width:
            break
    return layout


def format_columns(names: Sequence[str], term_width: int, min_space: int) -> list[str]:
    """Render ``names`` as lines of padded columns, column-major."""
    layout = compute_layout([len(name) for name in names], term_width, min_space)
    return [
        "".join(
            names[layout.entry_index(line, column)].ljust(
                layout.column_widths[column] + min_space
            )
            for column in range(layout.columns_in_line(line))
        )
        for line in range(layout.line_count)
    ]


def terminal_width() -> int:
    """Width of the terminal on standard output, or 80 when there is none."""
    try:
        return os.get_terminal_size(sys.__stdout__.fileno()).columns
    except (OSError, ValueError, AttributeError):
        return _FALLBACK_WIDTH