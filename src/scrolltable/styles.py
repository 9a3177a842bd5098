"""
Table styling configuration.

A :class:`Styles` bundle is read-only configuration: a title style for the
header line, a pure per-cell style selector and the column separator.
Instances are produced by factories, one per table, rather than shared
as module globals.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from scrolltable.ansi import style

if TYPE_CHECKING:
    from scrolltable.table import Table


@dataclass(frozen=True)
class CellStyle:
    """
    Presentation attributes for a run of text.

    Attributes
    ----------
    fg, bg:
        Colour values accepted by :func:`scrolltable.ansi.style`
        (palette index, ``#hex`` or a ready escape sequence).
    bold, dim, italic, underline, strikethrough:
        SGR attribute flags.
    """

    fg: str | None = None
    bg: str | None = None
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False

    def render(self, text: str) -> str:
        """Wrap *text* in this style's escape sequences."""
        return style(
            text,
            fg=self.fg,
            bg=self.bg,
            bold=self.bold,
            dim=self.dim,
            italic=self.italic,
            underline=self.underline,
            strikethrough=self.strikethrough,
        )

    def copy(self, **changes: object) -> CellStyle:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)  # type: ignore[arg-type]


PLAIN = CellStyle()
"""Style that leaves text untouched."""

CellSelector = Callable[["Table", int, int], CellStyle]
"""``(table, row_index, col_index) -> CellStyle``."""

DEFAULT_COLUMN_SEPARATOR = "│ "


def _plain_cell(table: Table, row_index: int, col_index: int) -> CellStyle:
    return PLAIN


@dataclass(frozen=True)
class Styles:
    """
    Styling bundle consumed by the layout pass.

    Attributes
    ----------
    title:
        Style applied to the whole header line.
    cell:
        Selector called once per cell with the table, row index and
        column index.  Must be deterministic for a given table state.
    column_separator:
        Text placed after each tab stop, at the start of every cell but
        the first.
    """

    title: CellStyle = PLAIN
    cell: CellSelector = field(default=_plain_cell)
    column_separator: str = ""


def cursor_selector(
    selected: CellStyle,
    row: CellStyle = PLAIN,
    highlighted: CellStyle | None = None,
    highlight_column: int | None = None,
) -> CellSelector:
    """
    Build a selector that marks the cursor row.

    Cells on the cursor row get *selected*; cells in *highlight_column*
    get *highlighted*; everything else gets *row*.
    """

    def select(table: Table, row_index: int, col_index: int) -> CellStyle:
        if table.cursor == row_index:
            return selected
        if highlighted is not None and col_index == highlight_column:
            return highlighted
        return row

    return select


def default_styles() -> Styles:
    """Return a fresh default styling bundle."""
    row = PLAIN
    return Styles(
        title=CellStyle(bold=True),
        cell=cursor_selector(
            selected=CellStyle(fg="170", bold=True),
            row=row,
            highlighted=row.copy(italic=True, fg="#EDFB78"),
            highlight_column=1,
        ),
        column_separator=DEFAULT_COLUMN_SEPARATOR,
    )


def plain_styles() -> Styles:
    """Return a bundle that emits no escape sequences and no separator."""
    return Styles()
