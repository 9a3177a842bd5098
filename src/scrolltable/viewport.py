"""
Vertically scrollable text surface.

``Viewport`` holds a block of pre-rendered lines and exposes a window of
``height`` lines starting at ``y_offset``.
"""

from __future__ import annotations


class Viewport:
    """
    A fixed-size window over a list of lines.

    Negative sizes are clamped to zero; a zero-height viewport shows
    nothing.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = max(width, 0)
        self._height = max(height, 0)
        self._lines: list[str] = []
        self.y_offset: int = 0

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = max(value, 0)

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = max(value, 0)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def set_content(self, text: str) -> None:
        """Replace the content; jump to the bottom if the offset fell off the end."""
        self._lines = text.split("\n")
        if self.y_offset > len(self._lines) - 1:
            self.goto_bottom()

    @property
    def max_y_offset(self) -> int:
        return max(0, len(self._lines) - self._height)

    @property
    def at_top(self) -> bool:
        return self.y_offset <= 0

    @property
    def at_bottom(self) -> bool:
        return self.y_offset >= self.max_y_offset

    def set_y_offset(self, n: int) -> None:
        self.y_offset = min(max(n, 0), self.max_y_offset)

    # ------------------------------------------------------------------
    # Scrolling
    # ------------------------------------------------------------------

    def line_down(self, n: int = 1) -> None:
        if self.at_bottom or n <= 0:
            return
        self.set_y_offset(self.y_offset + n)

    def line_up(self, n: int = 1) -> None:
        if self.at_top or n <= 0:
            return
        self.set_y_offset(self.y_offset - n)

    def view_down(self) -> None:
        """Scroll down by one page."""
        if self.at_bottom:
            return
        self.set_y_offset(self.y_offset + self._height)

    def view_up(self) -> None:
        """Scroll up by one page."""
        if self.at_top:
            return
        self.set_y_offset(self.y_offset - self._height)

    def goto_top(self) -> None:
        self.y_offset = 0

    def goto_bottom(self) -> None:
        self.y_offset = self.max_y_offset

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def visible_lines(self) -> list[str]:
        """Return the lines currently inside the window."""
        if self._height == 0:
            return []
        return self._lines[self.y_offset:self.y_offset + self._height]

    def view(self) -> str:
        """Return the window as text, padded with blank lines to ``height``."""
        lines = self.visible_lines()
        lines.extend([""] * (self._height - len(lines)))
        return "\n".join(lines)
