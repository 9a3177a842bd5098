"""
Scrollable, column-aligned table component for terminal interfaces.

Renders a fixed header over a body that scrolls by row and by display
column, keeps a single-row cursor visible, and stays aligned in the
presence of wide glyphs and ANSI styling.
"""
from __future__ import annotations

from scrolltable.component import Component
from scrolltable.config import TableConfig
from scrolltable.keybindings import DEFAULT_KEYBINDINGS, KeybindingsManager
from scrolltable.keys import Event, Key, Resize, parse_key
from scrolltable.rows import Row, SimpleRow, TextSink
from scrolltable.styles import CellStyle, Styles, cursor_selector, default_styles, plain_styles
from scrolltable.table import Command, Table
from scrolltable.tabwriter import TabWriter
from scrolltable.truncate import clip_width, pad_lines, truncate_offset
from scrolltable.viewport import Viewport

__version__ = "0.1.0"

__all__ = [
    # Core
    "Table",
    "Command",
    "Component",
    "Viewport",
    # Rows
    "Row",
    "SimpleRow",
    "TextSink",
    # Layout
    "TabWriter",
    "truncate_offset",
    "clip_width",
    "pad_lines",
    # Styling
    "CellStyle",
    "Styles",
    "cursor_selector",
    "default_styles",
    "plain_styles",
    # Events and keys
    "Event",
    "Key",
    "Resize",
    "parse_key",
    "KeybindingsManager",
    "DEFAULT_KEYBINDINGS",
    # Configuration
    "TableConfig",
]
