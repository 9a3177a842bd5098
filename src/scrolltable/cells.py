"""
Escape-aware display width arithmetic.

Terminal columns are not characters: East Asian wide glyphs take two
columns, combining marks and escape sequences take none.  Character
widths come from :mod:`rich.cells`; escape sequences are recognised
with regular expressions and treated as zero width.
"""

from __future__ import annotations

import re

from rich.cells import cell_len, get_character_cell_size

# CSI (with parameters and intermediates), OSC (BEL or ST terminated) and
# two-byte Fe escapes.
ANSI_ESCAPE_RE = re.compile(
    r"(?:\x1b\[|\x9b)[0-?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
    r"|\x1b[@-Z\\-_]"
)

# A single escape sequence anchored at the start of a line.
LEADING_ESCAPE_RE = re.compile(
    "^[\u001b\u009b][\\[\\]()#;?]*"
    "(?:(?:(?:[a-zA-Z\\d]*(?:;[a-zA-Z\\d]*)*)?\u0007)"
    "|(?:(?:\\d{1,4}(?:;\\d{0,4})*)?[\\dA-PRZcf-ntqry=><~]))"
)


def strip_ansi(text: str) -> str:
    """Remove every escape sequence from *text*."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_width(ch: str) -> int:
    """Return the number of terminal columns occupied by one character."""
    return get_character_cell_size(ch)


def printable_width(text: str) -> int:
    """
    Return the display width of a single-line fragment.

    Escape sequences count as zero; wide glyphs count as two.
    """
    return cell_len(strip_ansi(text))


def content_width(text: str) -> int:
    """Return the printable width of the widest line in a block of text."""
    return max((printable_width(line) for line in text.split("\n")), default=0)


def split_leading_escape(line: str) -> tuple[str, str]:
    """
    Detach the escape sequence at the very start of *line*.

    Returns ``(sequence, remainder)``; *sequence* is empty when the line
    does not begin with one.  Only the first sequence is detached.
    """
    match = LEADING_ESCAPE_RE.match(line)
    if match is None:
        return "", line
    return match.group(0), line[match.end():]


def join_leading_escape(sequence: str, remainder: str) -> str:
    """Reattach a sequence detached by :func:`split_leading_escape`."""
    return f"{sequence}{remainder}"
