"""
Horizontal clipping of rendered text.

:func:`truncate_offset` scrolls a block of lines to the left by a number of
display columns, :func:`clip_width` cuts lines on the right edge, and
:func:`pad_lines` squares a block off to a common width.
"""

from __future__ import annotations

from scrolltable.cells import (
    ANSI_ESCAPE_RE,
    char_width,
    join_leading_escape,
    printable_width,
    split_leading_escape,
)


def truncate_offset(text: str, offset: int, *, all_sequences: bool = False) -> str:
    """
    Drop the first *offset* display columns from every line of *text*.

    A single escape sequence at the start of a line is detached before
    cutting and put back afterwards, so a line-wide style survives the
    scroll.  When the cut falls inside a wide glyph, the glyph is dropped
    and replaced by spaces for the columns that would still be visible.

    With ``all_sequences=False`` (the default) only that leading sequence
    is recognised; any later sequence is walked as ordinary characters and
    can be cut through.  ``all_sequences=True`` treats every escape
    sequence as zero width and keeps the ones falling inside the cut
    region, which changes the output for multi-styled lines.
    """
    if offset <= 0:
        return text

    cut = _cut_all_sequences if all_sequences else _cut_leading_sequence
    return "\n".join(cut(line, offset) for line in text.split("\n"))


def _cut_leading_sequence(line: str, offset: int) -> str:
    sequence, rest = split_leading_escape(line)

    total = consumed = spaces = 0
    for ch in rest:
        total += char_width(ch)
        consumed += 1
        if total >= offset:
            spaces = total - offset
            break

    return join_leading_escape(sequence, " " * spaces + rest[consumed:])


def _cut_all_sequences(line: str, offset: int) -> str:
    kept: list[str] = []
    total = spaces = 0
    i = 0
    n = len(line)
    while i < n:
        match = ANSI_ESCAPE_RE.match(line, i)
        if match:
            kept.append(match.group(0))
            i = match.end()
            continue
        total += char_width(line[i])
        i += 1
        if total >= offset:
            spaces = total - offset
            break

    return "".join(kept) + " " * spaces + line[i:]


def clip_width(line: str, max_width: int) -> str:
    """
    Cut *line* to at most *max_width* display columns.

    Escape sequences are kept wherever they occur, including past the cut,
    so resets still reach the terminal.  A wide glyph that would straddle
    the edge is dropped.  ``max_width <= 0`` means no limit.
    """
    if max_width <= 0 or printable_width(line) <= max_width:
        return line

    out: list[str] = []
    col = 0
    full = False
    i = 0
    n = len(line)
    while i < n:
        match = ANSI_ESCAPE_RE.match(line, i)
        if match:
            out.append(match.group(0))
            i = match.end()
            continue
        if not full:
            w = char_width(line[i])
            if col + w > max_width:
                full = True
            else:
                out.append(line[i])
                col += w
        i += 1

    return "".join(out)


def pad_lines(lines: list[str]) -> list[str]:
    """Right-pad each line with spaces to the widest line's display width."""
    widths = [printable_width(line) for line in lines]
    target = max(widths, default=0)
    return [line + " " * (target - w) for line, w in zip(lines, widths)]
