"""
Row renderers.

A row writes itself as one newline-terminated line of tab-separated cells
into the table's text sink.  The tab writer aligns the cells afterwards,
so a row only decides content and styling.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from scrolltable.table import Table


class TextSink(Protocol):
    """Anything accepting text, e.g. :class:`scrolltable.tabwriter.TabWriter`."""

    def write(self, text: str) -> int: ...


class Row(ABC):
    """
    Base class for table rows.

    Subclasses implement :meth:`render`.  Join cells with ``"\\t"`` so they
    align, and compare ``table.cursor == index`` to detect selection.
    """

    @abstractmethod
    def render(self, sink: TextSink, table: Table, index: int) -> None:
        """
        Write this row into *sink*.

        Parameters
        ----------
        sink:
            Destination for exactly one newline-terminated line.
        table:
            The table being laid out; read-only during rendering.
        index:
            Position of this row in ``table.rows``.
        """
        ...


class SimpleRow(Row):
    """
    A row of opaque values.

    Each value is converted with ``str()`` and styled through
    ``table.styles.cell``; cells are joined by a tab followed by the
    column separator.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any]) -> None:
        self._values: tuple[Any, ...] = tuple(values)

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    def render(self, sink: TextSink, table: Table, index: int) -> None:
        styles = table.styles
        cells = [
            styles.cell(table, index, col).render(str(value))
            for col, value in enumerate(self._values)
        ]
        sink.write(("\t" + styles.column_separator).join(cells) + "\n")

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Any:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleRow):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"SimpleRow({list(self._values)!r})"
