import os
from unittest import mock

import pytest

from lskit.columns import ColumnLayout, compute_layout, format_columns, terminal_width


def test_everything_on_one_line_when_wide():
    layout = compute_layout([1, 2, 1], 100, 2)
    assert layout.line_count == 1
    assert layout.column_count == 3
    assert layout.column_widths == (1, 2, 1)


def test_one_entry_per_line_when_nothing_fits():
    layout = compute_layout([5, 5, 5, 5], 0, 2)
    assert layout.line_count == 4
    assert layout.column_count == 1
    assert layout.column_widths == (5,)


def test_empty_layout():
    layout = compute_layout([], 80, 2)
    assert layout.line_count == 0
    assert layout.column_count == 0
    assert format_columns([], 80, 2) == []


@pytest.mark.parametrize("count", [1, 2, 5, 6, 7, 11])
@pytest.mark.parametrize("term_width", [0, 10, 20, 1000])
def test_layout_covers_every_entry_once(count, term_width):
    widths = [(i % 4) + 1 for i in range(count)]
    layout = compute_layout(widths, term_width, 2)
    seen = [
        layout.entry_index(line, column)
        for line in range(layout.line_count)
        for column in range(layout.columns_in_line(line))
    ]
    assert sorted(seen) == list(range(count))


@pytest.mark.parametrize("count", [3, 8, 13])
def test_layout_fits_when_possible(count):
    widths = [3] * count
    layout = compute_layout(widths, 20, 2)
    assert sum(w + 2 for w in layout.column_widths) <= 20
    if layout.line_count > 1:
        tighter = compute_layout(widths[: count], 20, 2)
        assert tighter.line_count == layout.line_count


def test_columns_in_line_and_entry_index():
    layout = ColumnLayout(line_count=2, column_count=3, full_lines=1, column_widths=(1, 1, 1))
    assert layout.columns_in_line(0) == 3
    assert layout.columns_in_line(1) == 2
    assert layout.entry_index(1, 2) == 5


def test_format_single_line():
    assert format_columns(["a", "bb", "c"], 100, 2) == ["a  bb  c  "]


def test_format_narrow_terminal_keeps_names():
    names = ["alpha", "beta", "gamma"]
    lines = format_columns(names, 0, 2)
    assert [line.rstrip() for line in lines] == names


def test_format_lines_fit_width():
    names = [f"name{i}" for i in range(20)]
    lines = format_columns(names, 40, 2)
    assert all(len(line) <= 40 for line in lines)
    words = sorted(word for line in lines for word in line.split())
    assert words == sorted(names)


def test_terminal_width_reads_terminal():
    with mock.patch("lskit.columns.os.get_terminal_size", return_value=os.terminal_size((123, 40))):
        assert terminal_width() == 123


def test_terminal_width_falls_back_without_terminal():
    with mock.patch("lskit.columns.os.get_terminal_size", side_effect=OSError):
        assert terminal_width() == 80