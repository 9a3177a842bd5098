"""
Configuration for the table component.

``TableConfig`` collects the tunables a host may want to expose to users
(colours, separator, column padding, key overrides) and can be loaded from
YAML or constructed programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from scrolltable.ansi import color_sequence
from scrolltable.keybindings import KeybindingsManager
from scrolltable.styles import DEFAULT_COLUMN_SEPARATOR, PLAIN, CellStyle, Styles, cursor_selector


@dataclass
class TableConfig:
    """
    User-facing table settings.

    Example YAML:
        column_separator: "| "
        padding: 2
        selected_fg: "#ff8800"
        highlight_column: null
        keybindings:
          down: [down, j, ctrl+n]
    """

    # Layout
    column_separator: str = DEFAULT_COLUMN_SEPARATOR
    padding: int = 1  # Spaces after the widest cell of a column
    min_width: int = 0  # Minimum column width, padding included

    # Colours: 256-colour index as digits or "#rrggbb"
    selected_fg: str | None = "170"
    selected_bold: bool = True
    highlight_column: int | None = 1  # None disables column highlighting
    highlight_fg: str | None = "#EDFB78"
    title_bold: bool = True

    # Horizontal scrolling
    # False restores the leading-sequence-only cut, which garbles lines
    # holding more than one styled cell.
    preserve_all_escapes: bool = True

    # Key overrides, action -> descriptors
    keybindings: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Fail on bad colours at load time rather than on first render.
        for color in (self.selected_fg, self.highlight_fg):
            if color is not None:
                color_sequence(color)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TableConfig:
        """Create config from a dictionary; unknown keys are ignored."""
        defaults = cls()
        keybindings = {
            str(action): [keys] if isinstance(keys, str) else list(keys)
            for action, keys in (data.get("keybindings") or {}).items()
        }
        return cls(
            column_separator=data.get("column_separator", defaults.column_separator),
            padding=data.get("padding", defaults.padding),
            min_width=data.get("min_width", defaults.min_width),
            selected_fg=_color(data.get("selected_fg", defaults.selected_fg)),
            selected_bold=data.get("selected_bold", defaults.selected_bold),
            highlight_column=data.get("highlight_column", defaults.highlight_column),
            highlight_fg=_color(data.get("highlight_fg", defaults.highlight_fg)),
            title_bold=data.get("title_bold", defaults.title_bold),
            preserve_all_escapes=data.get("preserve_all_escapes", defaults.preserve_all_escapes),
            keybindings=keybindings,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> TableConfig:
        """Load config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_string(cls, content: str) -> TableConfig:
        """Load config from a YAML string."""
        data = yaml.safe_load(content)
        return cls.from_dict(data or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "column_separator": self.column_separator,
            "padding": self.padding,
            "min_width": self.min_width,
            "selected_fg": self.selected_fg,
            "selected_bold": self.selected_bold,
            "highlight_column": self.highlight_column,
            "highlight_fg": self.highlight_fg,
            "title_bold": self.title_bold,
            "preserve_all_escapes": self.preserve_all_escapes,
            "keybindings": {action: list(keys) for action, keys in self.keybindings.items()},
        }

    def styles(self) -> Styles:
        """Build the styling bundle described by this config."""
        row = PLAIN
        highlighted = None
        if self.highlight_column is not None:
            highlighted = row.copy(italic=True, fg=self.highlight_fg)
        return Styles(
            title=CellStyle(bold=self.title_bold),
            cell=cursor_selector(
                selected=CellStyle(fg=self.selected_fg, bold=self.selected_bold),
                row=row,
                highlighted=highlighted,
                highlight_column=self.highlight_column,
            ),
            column_separator=self.column_separator,
        )

    def keymap(self) -> KeybindingsManager:
        """Build the keybindings described by this config."""
        return KeybindingsManager(user_overrides=self.keybindings or None)


def _color(value: Any) -> str | None:
    # YAML reads an unquoted palette index such as 170 as an int.
    if value is None:
        return None
    return str(value)
