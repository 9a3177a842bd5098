"""
ANSI escape sequence primitives used to paint table text.

Provides the escape constants, colour helpers and the :func:`style`
function that wraps a cell or header in SGR codes.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Escape sequences
# ---------------------------------------------------------------------------

ESC = "\033"
CSI = f"{ESC}["
RESET = f"{CSI}0m"


# ---------------------------------------------------------------------------
# Colour helpers
# ---------------------------------------------------------------------------

def _hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert a hex color string (with or without '#') to an (r, g, b) tuple."""
    h = hex_color.lstrip("#")
    if len(h) == 3:
        h = h[0] * 2 + h[1] * 2 + h[2] * 2
    if len(h) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def color_params(color: str, *, background: bool = False) -> str:
    """
    Resolve a colour value into SGR parameters, without the ``CSI``/``m`` framing.

    Accepts an already-formed SGR sequence (``"\\x1b[31m"``), a 256-colour
    palette index written as digits (``"170"``) or a hex colour
    (``"#EDFB78"``).

    >>> color_params("170")
    '38;5;170'
    >>> color_params("#ff8800", background=True)
    '48;2;255;136;0'
    """
    if color.startswith(ESC):
        if not (color.startswith(CSI) and color.endswith("m")):
            raise ValueError(f"Not an SGR sequence: {color!r}")
        return color[len(CSI):-1]

    base = 48 if background else 38
    if color.isdigit():
        index = int(color)
        if not 0 <= index <= 255:
            raise ValueError(f"Palette index out of range: {index!r}")
        return f"{base};5;{index}"

    r, g, b = _hex_to_rgb(color)
    return f"{base};2;{r};{g};{b}"


def color_sequence(color: str, *, background: bool = False) -> str:
    """Return the escape sequence that selects *color*."""
    return f"{CSI}{color_params(color, background=background)}m"


# ---------------------------------------------------------------------------
# Text styling
# ---------------------------------------------------------------------------

_STYLE_CODES: dict[str, int] = {
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "underline": 4,
    "strikethrough": 9,
}


def style(
    text: str,
    *,
    fg: str | None = None,
    bg: str | None = None,
    bold: bool = False,
    dim: bool = False,
    italic: bool = False,
    underline: bool = False,
    strikethrough: bool = False,
) -> str:
    """
    Apply ANSI styling to *text*.

    Attributes and colours go into a single SGR sequence, so the styled
    text always starts with exactly one escape sequence.

    Parameters
    ----------
    text:
        The string to style.
    fg:
        Foreground color -- an already-formed SGR sequence, a 256-colour
        palette index (e.g. ``'170'``) or a hex color (e.g. ``'#ff0000'``).
    bg:
        Background color -- same format options as *fg*.
    bold, dim, italic, underline, strikethrough:
        Boolean attribute flags.

    Returns
    -------
    str
        The text wrapped in one SGR sequence with a trailing ``RESET``, or
        *text* unchanged when no styling applies.

    >>> style("x", fg="170", bold=True)
    '\\x1b[1;38;5;170mx\\x1b[0m'
    """
    attrs = {
        "bold": bold,
        "dim": dim,
        "italic": italic,
        "underline": underline,
        "strikethrough": strikethrough,
    }
    codes = [str(_STYLE_CODES[name]) for name, enabled in attrs.items() if enabled]

    if fg is not None:
        codes.append(color_params(fg))
    if bg is not None:
        codes.append(color_params(bg, background=True))

    if not codes:
        return text

    return f"{CSI}{';'.join(codes)}m{text}{RESET}"
