"""
Scrollable table component.

``Table`` owns the view state: cursor, horizontal offset, size and the
vertical :class:`~scrolltable.viewport.Viewport`.  Every change to the
cursor, offset, rows or columns re-runs the layout synchronously:

1. the header and every row are written through a
   :class:`~scrolltable.tabwriter.TabWriter` so columns align;
2. the widest line is recorded as the content width;
3. the block is scrolled left by the horizontal offset;
4. the first line becomes the header, the rest is pushed into the viewport.

The header never scrolls vertically.  ``view()`` stacks it on top of the
viewport's window.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from scrolltable.cells import content_width
from scrolltable.component import Component
from scrolltable.config import TableConfig
from scrolltable.keybindings import KeybindingsManager
from scrolltable.keys import Event, Key, Resize
from scrolltable.logging import get_logger
from scrolltable.rows import Row
from scrolltable.styles import Styles, default_styles
from scrolltable.tabwriter import TabWriter
from scrolltable.truncate import clip_width, pad_lines, truncate_offset
from scrolltable.viewport import Viewport

logger = get_logger("table")

Command = Callable[[], object]
"""Follow-up work a host should schedule after :meth:`Table.update`."""


class Table(Component):
    """
    Interactive table with a fixed header and a scrollable body.

    Parameters
    ----------
    columns:
        Header labels.
    width, height:
        Size of the whole component; one line goes to the header.
        A width of zero or less disables right-edge clipping.
    styles:
        Styling bundle; defaults to ``config.styles()`` or
        :func:`~scrolltable.styles.default_styles`.
    keymap:
        Key bindings; defaults to ``config.keymap()`` or the stock bindings.
    config:
        Optional :class:`~scrolltable.config.TableConfig` for layout and
        styling settings.
    """

    def __init__(
        self,
        columns: Sequence[str],
        width: int,
        height: int,
        *,
        styles: Styles | None = None,
        keymap: KeybindingsManager | None = None,
        config: TableConfig | None = None,
    ) -> None:
        super().__init__()
        if styles is None:
            styles = config.styles() if config is not None else default_styles()
        if keymap is None:
            keymap = config.keymap() if config is not None else KeybindingsManager()
        settings = config or TableConfig()

        self.styles: Styles = styles
        self.keymap: KeybindingsManager = keymap

        self._columns: list[str] = list(columns)
        self._rows: list[Row] = []
        # Plain header until the first layout pass.
        self._header: str = " ".join(self._columns)
        self._height: int = height
        self._viewport = Viewport(width, height - 1)
        self._tab_writer = TabWriter(min_width=settings.min_width, padding=settings.padding)
        self._all_sequences = settings.preserve_all_escapes
        self._cursor: int = 0
        self._offset: int = 0
        self._content_width: int = 0

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def cursor(self) -> int:
        """Index of the selected row."""
        return self._cursor

    @property
    def offset(self) -> int:
        """Display columns scrolled off the left edge."""
        return self._offset

    @property
    def content_width(self) -> int:
        """Width of the widest laid-out line, before horizontal scrolling."""
        return self._content_width

    @property
    def width(self) -> int:
        return self._viewport.width

    @property
    def height(self) -> int:
        return self._height

    @property
    def columns(self) -> list[str]:
        return list(self._columns)

    @property
    def rows(self) -> list[Row]:
        return list(self._rows)

    @property
    def viewport(self) -> Viewport:
        """The body surface.  Hosts should treat it as read-only."""
        return self._viewport

    def selected_row(self) -> Row | None:
        """
        Return the row under the cursor, or ``None`` when there is none.

        Callers can downcast to their own :class:`Row` implementation.
        """
        if 0 <= self._cursor < len(self._rows):
            return self._rows[self._cursor]
        return None

    def cursor_is_at_top(self) -> bool:
        return self._cursor == 0

    def cursor_is_at_bottom(self) -> bool:
        return self._cursor == len(self._rows) - 1

    def cursor_is_past_bottom(self) -> bool:
        return self._cursor > len(self._rows) - 1

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_size(self, width: int, height: int) -> None:
        """
        Resize the component.

        If the cursor falls below the new window it is pulled up to the
        window's last line.  Degenerate sizes are accepted.
        """
        self._height = height
        self._viewport.width = width
        self._viewport.height = height - 1
        self.invalidate()

        relayout = False
        last_visible = self._viewport.y_offset + self._viewport.height - 1
        if self._cursor > last_visible:
            clamped = max(last_visible, 0)
            logger.debug("Resize to %dx%d moves cursor %d -> %d", width, height, self._cursor, clamped)
            self._cursor = clamped
            relayout = True
        if self._offset > self._max_offset():
            self._offset = self._max_offset()
            relayout = True

        if relayout:
            self._update_view()

    def set_rows(self, rows: Sequence[Row]) -> None:
        """
        Replace all rows and re-layout.

        The cursor and offsets are kept; after a drastic change in row
        count, use :meth:`go_top` or :meth:`go_bottom` to re-anchor.
        """
        logger.debug("Setting %d rows (cursor %d)", len(rows), self._cursor)
        self._rows = list(rows)
        self._update_view()

    def set_columns(self, columns: Sequence[str]) -> None:
        """Replace the header labels and re-layout."""
        self._columns = list(columns)
        self._update_view()

    def _max_offset(self) -> int:
        return max(0, self._content_width - self._viewport.width)

    def _update_view(self) -> None:
        separator = "\t" + self.styles.column_separator
        tw = self._tab_writer
        tw.write(self.styles.title.render(separator.join(self._columns)) + "\n")
        for index, row in enumerate(self._rows):
            row.render(tw, self, index)
        content = tw.flush()

        self._content_width = content_width(content)
        if self._offset > 0:
            content = truncate_offset(content, self._offset, all_sequences=self._all_sequences)

        header, _, body = content.partition("\n")
        self._header = header
        self._viewport.set_content(body.rstrip())
        self.invalidate()

    def _scroll_to_cursor(self) -> None:
        vp = self._viewport
        if vp.height == 0:
            return
        if self._cursor < vp.y_offset:
            vp.line_up(vp.y_offset - self._cursor)
        elif self._cursor > vp.y_offset + vp.height - 1:
            vp.line_down(self._cursor - (vp.y_offset + vp.height - 1))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def go_up(self) -> None:
        """Select the previous row, scrolling one line if needed."""
        if not self._rows or self.cursor_is_at_top():
            return

        self._cursor = min(self._cursor - 1, len(self._rows) - 1)
        self._update_view()
        self._scroll_to_cursor()

    def go_down(self) -> None:
        """Select the next row, scrolling one line if needed."""
        if not self._rows or self.cursor_is_at_bottom():
            return

        self._cursor = min(self._cursor + 1, len(self._rows) - 1)
        self._update_view()
        self._scroll_to_cursor()

    def go_page_up(self) -> None:
        """Move the selection and the window up by one page."""
        if not self._rows or self.cursor_is_at_top():
            return

        self._cursor = max(min(self._cursor - self._viewport.height, len(self._rows) - 1), 0)
        self._update_view()
        self._viewport.view_up()
        self._scroll_to_cursor()

    def go_page_down(self) -> None:
        """Move the selection and the window down by one page."""
        if not self._rows or self.cursor_is_at_bottom():
            return

        self._cursor += self._viewport.height
        if self.cursor_is_past_bottom():
            self._cursor = len(self._rows) - 1
        self._update_view()
        self._viewport.view_down()
        self._scroll_to_cursor()

    def go_top(self) -> None:
        """Select the first row and scroll to the top."""
        if not self._rows or self.cursor_is_at_top():
            return

        self._cursor = 0
        self._update_view()
        self._viewport.goto_top()

    def go_bottom(self) -> None:
        """Select the last row and scroll to the bottom."""
        if not self._rows or self.cursor_is_at_bottom():
            return

        self._cursor = len(self._rows) - 1
        self._update_view()
        self._viewport.goto_bottom()
        self._scroll_to_cursor()

    def go_right(self) -> None:
        """Scroll one display column right, until the content's right edge shows."""
        if self._viewport.width + self._offset >= self._content_width:
            return

        self._offset += 1
        self._update_view()

    def go_left(self) -> None:
        """Scroll one display column left."""
        if self._offset == 0:
            return

        self._offset -= 1
        self._update_view()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _actions(self) -> dict[str, Callable[[], None]]:
        return {
            "up": self.go_up,
            "down": self.go_down,
            "page_up": self.go_page_up,
            "page_down": self.go_page_down,
            "home": self.go_top,
            "end": self.go_bottom,
            "left": self.go_left,
            "right": self.go_right,
        }

    def handle_input(self, key: Key) -> bool:
        """Run the navigation bound to *key*; return whether one matched."""
        action = self.keymap.find_action(key)
        if action is None:
            return False
        handler = self._actions().get(action)
        if handler is None:
            return False
        handler()
        return True

    def update(self, event: Event) -> tuple[Table, Command | None]:
        """
        Apply one input event.

        Key presses go through the key bindings, ``Resize`` events to
        :meth:`set_size`; anything else is ignored.  The table is updated
        in place and returned with no follow-up command.
        """
        if isinstance(event, Resize):
            self.set_size(event.width, event.height)
        elif isinstance(event, Key):
            self.handle_input(event)
        return self, None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def view(self) -> str:
        """
        Render the header above the visible body lines.

        Lines are padded to a common width, then clipped to the table
        width when it is positive.
        """
        if self._height <= 0:
            return ""

        lines = [self._header]
        if self._viewport.height > 0:
            lines.extend(self._viewport.view().split("\n"))

        return "\n".join(clip_width(line, self._viewport.width) for line in pad_lines(lines))

    def render(self, width: int) -> list[str]:
        """Return the lines of :meth:`view`, each clipped to *width*."""
        text = self.view()
        self._dirty = False
        if not text:
            return []
        return [clip_width(line, width) for line in text.split("\n")]
