"""
Input events for the table.

``Key`` is a parsed key press and ``Resize`` a terminal size change.
:func:`parse_key` translates raw terminal bytes into ``Key`` objects for
hosts that read stdin themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Event data model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Key:
    """
    Parsed representation of a single key press.

    Attributes
    ----------
    name:
        Symbolic name for special keys (e.g. ``'page_down'``).  For plain
        printable characters this equals *char*.
    char:
        The literal character, if printable.  Empty string otherwise.
    ctrl, alt, shift:
        Modifier flags.
    """

    name: str
    char: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False


@dataclass(frozen=True)
class Resize:
    """The host's drawing area changed to *width* x *height* cells."""

    width: int
    height: int


Event = Key | Resize


KEY_UNKNOWN = Key(name="unknown")
KEY_ESCAPE = Key(name="escape")
KEY_ENTER = Key(name="enter", char="\r")

KEY_UP = Key(name="up")
KEY_DOWN = Key(name="down")
KEY_LEFT = Key(name="left")
KEY_RIGHT = Key(name="right")

KEY_HOME = Key(name="home")
KEY_END = Key(name="end")
KEY_PAGE_UP = Key(name="page_up")
KEY_PAGE_DOWN = Key(name="page_down")


# ---------------------------------------------------------------------------
# Escape sequence tables
# ---------------------------------------------------------------------------

# Final byte of ``CSI [1;mod] X`` and ``SS3 X`` sequences.
_FINAL_BYTE: dict[str, Key] = {
    "A": KEY_UP,
    "B": KEY_DOWN,
    "C": KEY_RIGHT,
    "D": KEY_LEFT,
    "H": KEY_HOME,
    "F": KEY_END,
}

# ``CSI <n> ~`` sequences.
_TILDE: dict[int, Key] = {
    1: KEY_HOME,
    4: KEY_END,
    5: KEY_PAGE_UP,
    6: KEY_PAGE_DOWN,
    7: KEY_HOME,
    8: KEY_END,
}


def _with_modifier(key: Key, code: str) -> Key:
    """Apply an xterm modifier parameter (``1 + shift + 2*alt + 4*ctrl``)."""
    if not code.isdigit():
        return key
    bits = int(code) - 1
    return Key(
        name=key.name,
        char=key.char,
        shift=bool(bits & 1),
        alt=bool(bits & 2),
        ctrl=bool(bits & 4),
    )


def _parse_csi(payload: str) -> Key:
    if not payload:
        return KEY_UNKNOWN

    params, final = payload[:-1], payload[-1]

    if final == "~":
        num, _, mod = params.partition(";")
        if not num.isdigit() or int(num) not in _TILDE:
            return KEY_UNKNOWN
        key = _TILDE[int(num)]
        return _with_modifier(key, mod) if mod else key

    key = _FINAL_BYTE.get(final)
    if key is None:
        return KEY_UNKNOWN
    if ";" in params:
        return _with_modifier(key, params.rsplit(";", 1)[1])
    return key if not params or params == "1" else KEY_UNKNOWN


def parse_key(data: bytes) -> Key:
    """
    Parse raw terminal input bytes into a ``Key``.

    Recognises arrows, Home/End and PageUp/PageDown in their CSI, tilde and
    SS3 forms (with xterm modifier suffixes), Enter, Escape, Ctrl+letter
    and printable UTF-8 characters.  Anything else yields
    ``Key(name="unknown")``.
    """
    if not data:
        return KEY_UNKNOWN

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return KEY_UNKNOWN

    if text == "\x1b":
        return KEY_ESCAPE
    if text.startswith("\x1b["):
        return _parse_csi(text[2:])
    if text.startswith("\x1bO") and len(text) == 3:
        return _FINAL_BYTE.get(text[2], KEY_UNKNOWN)
    if text.startswith("\x1b"):
        return KEY_UNKNOWN

    if text in ("\r", "\n"):
        return KEY_ENTER
    if len(text) == 1 and 1 <= ord(text) <= 26:
        letter = chr(ord(text) + 96)
        return Key(name=f"ctrl+{letter}", char=letter, ctrl=True)
    if len(text) == 1 and text.isprintable():
        return Key(name=text, char=text)

    return KEY_UNKNOWN
