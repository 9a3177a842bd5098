"""Shared pytest fixtures for scrolltable tests."""

from __future__ import annotations

import pytest

from scrolltable import Row, Table, plain_styles
from scrolltable.rows import TextSink


class PrefixedRow(Row):
    """Renders the selected row with a ``> `` prefix and no styling."""

    def __init__(self, *values: object) -> None:
        self.values = values

    def render(self, sink: TextSink, table: Table, index: int) -> None:
        line = "\t".join(str(v) for v in self.values)
        prefix = "> " if index == table.cursor else "  "
        sink.write(prefix + line + "\n")


def numbered_rows(count: int, fmt: str = "{}") -> list[Row]:
    return [PrefixedRow(fmt.format(i)) for i in range(count)]


@pytest.fixture
def numbered_table() -> Table:
    """Ten single-cell rows ``0..9`` in a 4-line table (3 body lines)."""
    table = Table(["  #"], 0, 4, styles=plain_styles())
    table.set_rows(numbered_rows(10))
    return table


@pytest.fixture
def item_table() -> Table:
    """Ten ``item N`` rows in a 4-line table."""
    table = Table(["  #"], 0, 4, styles=plain_styles())
    table.set_rows(numbered_rows(10, "item {}"))
    return table
