"""
Elastic tab-stop alignment.

``TabWriter`` buffers tab-separated text and, on :meth:`TabWriter.flush`,
pads every tab-terminated cell so that cells in the same column line up.
A column spans a block of consecutive lines that all have a
tab-terminated cell at that index; widths are computed per block, so a
line with fewer cells ends the blocks of the columns it lacks.  The text
after a line's last tab is not part of any column and is never padded.

Widths are display widths: escape sequences count as zero and wide glyphs
as two columns.
"""

from __future__ import annotations

from scrolltable.cells import printable_width


class TabWriter:
    """
    Column aligning text sink.

    Parameters
    ----------
    min_width:
        Minimum width of a column, padding included.
    tab_width:
        Tab stop width used when *pad_char* is ``"\\t"``.
    padding:
        Columns added to the widest cell of a column block.
    pad_char:
        Character used for padding.  With ``"\\t"`` the writer pads with
        tabs and rounds column widths up to multiples of *tab_width*.
    """

    def __init__(
        self,
        min_width: int = 0,
        tab_width: int = 4,
        padding: int = 1,
        pad_char: str = " ",
    ) -> None:
        if len(pad_char) != 1:
            raise ValueError(f"pad_char must be a single character: {pad_char!r}")
        self.min_width = min_width
        self.tab_width = tab_width
        self.padding = padding
        self.pad_char = pad_char
        self._buffer: list[str] = []

    def write(self, text: str) -> int:
        """Buffer *text*; nothing is formatted until :meth:`flush`."""
        self._buffer.append(text)
        return len(text)

    def flush(self) -> str:
        """Align the buffered text, return it and reset the buffer."""
        text = "".join(self._buffer)
        self._buffer.clear()
        if not text:
            return ""

        terminated = text.endswith("\n")
        raw_lines = text.split("\n")
        if terminated:
            raw_lines.pop()

        lines = [line.split("\t") for line in raw_lines]
        out: list[str] = []
        self._format(out, lines, 0, len(lines), [])

        result = "\n".join(out)
        if terminated:
            result += "\n"
        return result

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def _format(
        self,
        out: list[str],
        lines: list[list[str]],
        line0: int,
        line1: int,
        widths: list[int],
    ) -> None:
        column = len(widths)
        this = line0
        while this < line1:
            if column >= len(lines[this]) - 1:
                this += 1
                continue

            # Lines above the block only have the outer columns.
            self._write_lines(out, lines, line0, this, widths)
            line0 = this

            width = self.min_width
            while this < line1 and column < len(lines[this]) - 1:
                width = max(width, printable_width(lines[this][column]) + self.padding)
                this += 1

            self._format(out, lines, line0, this, widths + [width])
            line0 = this

        self._write_lines(out, lines, line0, line1, widths)

    def _write_lines(
        self,
        out: list[str],
        lines: list[list[str]],
        start: int,
        end: int,
        widths: list[int],
    ) -> None:
        for cells in lines[start:end]:
            parts: list[str] = []
            for j, cell in enumerate(cells):
                parts.append(cell)
                if j < len(widths):
                    parts.append(self._padding(printable_width(cell), widths[j]))
            out.append("".join(parts))

    def _padding(self, text_width: int, cell_width: int) -> str:
        if self.pad_char == "\t":
            if self.tab_width == 0:
                return ""
            cell_width = -(-cell_width // self.tab_width) * self.tab_width
            return "\t" * -(-(cell_width - text_width) // self.tab_width)
        return self.pad_char * (cell_width - text_width)
