"""Tests for the Table view state controller."""

from __future__ import annotations

import logging
import random

import pytest

from conftest import PrefixedRow, numbered_rows
from scrolltable import Key, Resize, SimpleRow, Styles, Table, TableConfig, plain_styles
from scrolltable.cells import printable_width, strip_ansi
from scrolltable.keys import KEY_DOWN, KEY_END, KEY_HOME, KEY_PAGE_DOWN, KEY_PAGE_UP, KEY_UP


def lines(*rows: str) -> str:
    return "\n".join(rows)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestView:
    """Tests for the rendered output."""

    def test_multi_column_alignment(self) -> None:
        table = Table(["  ID", "EMAIL", "USERNAME", "CREATED-AT"], 0, 5, styles=plain_styles())
        table.set_rows([
            PrefixedRow("1", "john@example.org", "john", "2022-02-21T18:02:29.762Z"),
            PrefixedRow("2", "bob@example.org", "bob", "2022-02-21T18:02:29.762Z"),
            PrefixedRow("3", "alice@example.org", "alice", "2022-02-21T18:02:29.762Z"),
            PrefixedRow("4", "thomas@example.org", "thomas", "2022-02-21T18:02:29.762Z"),
        ])

        assert table.view() == lines(
            "  ID EMAIL              USERNAME CREATED-AT" + " " * 14,
            "> 1  john@example.org   john     2022-02-21T18:02:29.762Z",
            "  2  bob@example.org    bob      2022-02-21T18:02:29.762Z",
            "  3  alice@example.org  alice    2022-02-21T18:02:29.762Z",
            "  4  thomas@example.org thomas   2022-02-21T18:02:29.762Z",
        )

    def test_basic_render(self, numbered_table: Table) -> None:
        assert numbered_table.view() == lines("  #", "> 0", "  1", "  2")

    def test_header_before_first_layout(self) -> None:
        table = Table(["ID", "NAME"], 0, 3, styles=plain_styles())
        assert table.view().split("\n")[0] == "ID NAME"

    def test_empty_rows_render_header_only(self) -> None:
        table = Table(["  #"], 0, 4, styles=plain_styles())
        table.set_rows([])

        view = table.view().split("\n")
        assert view[0] == "  #"
        assert len(view) == 4
        assert all(line.strip() == "" for line in view[1:])

    def test_non_positive_height_renders_nothing(self, numbered_table: Table) -> None:
        numbered_table.set_size(0, 0)
        assert numbered_table.view() == ""
        numbered_table.set_size(0, -3)
        assert numbered_table.view() == ""

    def test_height_one_renders_header_only(self, numbered_table: Table) -> None:
        numbered_table.set_size(0, 1)
        assert numbered_table.view() == "  #"

    def test_view_is_pure(self, numbered_table: Table) -> None:
        first = numbered_table.view()
        assert numbered_table.view() == first
        assert numbered_table.cursor == 0

    def test_width_clips_lines(self, item_table: Table) -> None:
        item_table.set_size(4, 5)
        assert item_table.view() == lines("  # ", "> it", "  it", "  it", "  it")

    def test_render_clips_and_clears_dirty(self, numbered_table: Table) -> None:
        assert numbered_table.dirty is True
        rendered = numbered_table.render(2)
        assert rendered == ["  ", "> ", "  ", "  "]
        assert numbered_table.dirty is False

        numbered_table.go_down()
        assert numbered_table.dirty is True

    def test_set_columns_relayouts(self, numbered_table: Table) -> None:
        numbered_table.set_columns(["  N"])
        assert numbered_table.view().split("\n")[0] == "  N"
        assert numbered_table.columns == ["  N"]

    def test_default_styles_highlight_cursor_row(self) -> None:
        table = Table(["ID", "NAME"], 0, 4)
        table.set_rows([SimpleRow([0, "a"]), SimpleRow([1, "b"])])
        header, first, second = table.view().split("\n")[:3]

        assert header.startswith("\x1b[1m")
        assert "\x1b[1;38;5;170m0\x1b[0m" in first
        assert "│ " in first
        # Column 1 of an unselected row is italic.
        assert "\x1b[3;38;2;237;251;120mb\x1b[0m" in second


# ---------------------------------------------------------------------------
# Vertical navigation
# ---------------------------------------------------------------------------


class TestVerticalNavigation:
    """Tests for cursor movement and viewport scrolling."""

    def test_up_from_top_is_noop(self, numbered_table: Table) -> None:
        initial = numbered_table.view()
        numbered_table.go_top()
        numbered_table.go_up()
        assert numbered_table.view() == initial
        assert numbered_table.cursor == 0

    def test_up_from_bottom(self, numbered_table: Table) -> None:
        numbered_table.go_bottom()
        numbered_table.go_up()
        assert numbered_table.view() == lines("  #", "  7", "> 8", "  9")

    def test_up_after_page_down_scrolls_one_line(self, numbered_table: Table) -> None:
        numbered_table.go_page_down()
        numbered_table.go_up()
        assert numbered_table.view() == lines("  #", "> 2", "  3", "  4")

    def test_down_from_top(self, numbered_table: Table) -> None:
        numbered_table.go_down()
        assert numbered_table.view() == lines("  #", "  0", "> 1", "  2")

    def test_down_from_bottom_is_noop(self, numbered_table: Table) -> None:
        numbered_table.go_bottom()
        bottom = numbered_table.view()
        numbered_table.go_down()
        assert numbered_table.view() == bottom == lines("  #", "  7", "  8", "> 9")

    def test_down_after_page_up_scrolls_one_line(self, numbered_table: Table) -> None:
        numbered_table.go_bottom()
        numbered_table.go_page_up()
        numbered_table.go_down()
        assert numbered_table.view() == lines("  #", "  5", "  6", "> 7")

    def test_page_down_from_top(self, numbered_table: Table) -> None:
        numbered_table.go_page_down()
        assert numbered_table.cursor == 3
        assert numbered_table.view() == lines("  #", "> 3", "  4", "  5")

    def test_page_down_near_bottom_clamps(self, numbered_table: Table) -> None:
        numbered_table.go_bottom()
        bottom = numbered_table.view()
        numbered_table.go_up()
        numbered_table.go_page_down()
        assert numbered_table.cursor == 9
        assert numbered_table.view() == bottom

    def test_page_up_from_bottom(self, numbered_table: Table) -> None:
        numbered_table.go_bottom()
        numbered_table.go_page_up()
        assert numbered_table.cursor == 6
        assert numbered_table.view() == lines("  #", "  4", "  5", "> 6")

    def test_page_up_near_top_clamps(self, numbered_table: Table) -> None:
        top = numbered_table.view()
        numbered_table.go_down()
        numbered_table.go_page_up()
        assert numbered_table.cursor == 0
        assert numbered_table.view() == top

    def test_top_and_bottom_are_idempotent(self, numbered_table: Table) -> None:
        numbered_table.go_bottom()
        bottom = numbered_table.view()
        numbered_table.go_bottom()
        assert numbered_table.view() == bottom

        numbered_table.go_top()
        top = numbered_table.view()
        numbered_table.go_top()
        assert numbered_table.view() == top == lines("  #", "> 0", "  1", "  2")

    def test_navigation_on_empty_rows_is_noop(self) -> None:
        table = Table(["  #"], 0, 4, styles=plain_styles())
        for move in (table.go_down, table.go_up, table.go_page_down, table.go_page_up,
                     table.go_bottom, table.go_top):
            move()
            assert table.cursor == 0

    def test_navigation_clamps_cursor_after_rows_shrink(self, numbered_table: Table) -> None:
        numbered_table.go_bottom()
        numbered_table.set_rows(numbered_rows(4))
        assert numbered_table.cursor == 9  # not auto-corrected

        numbered_table.go_up()
        assert numbered_table.cursor == 3

    def test_random_walk_keeps_cursor_visible(self) -> None:
        rng = random.Random(1234)
        table = Table(["  #"], 0, 6, styles=plain_styles())
        table.set_rows(numbered_rows(57))
        moves = [
            table.go_up, table.go_down, table.go_page_up, table.go_page_down,
            table.go_top, table.go_bottom,
        ]

        for _ in range(500):
            if rng.random() < 0.1:
                table.set_size(0, rng.randint(2, 12))
            else:
                rng.choice(moves)()

            vp = table.viewport
            assert 0 <= table.cursor < 57
            assert vp.y_offset <= table.cursor <= vp.y_offset + vp.height - 1


# ---------------------------------------------------------------------------
# Horizontal navigation
# ---------------------------------------------------------------------------


class TestHorizontalNavigation:
    """Tests for horizontal scrolling."""

    @pytest.fixture
    def wide_table(self) -> Table:
        table = Table(["ID", "NAME"], 5, 3, styles=plain_styles())
        table.set_rows([SimpleRow([1, "alice"]), SimpleRow([2, "bob"])])
        return table

    def test_initial_view_is_clipped(self, wide_table: Table) -> None:
        assert wide_table.content_width == 8
        assert wide_table.view() == lines("ID NA", "1  al", "2  bo")

    def test_left_at_zero_is_noop(self, wide_table: Table) -> None:
        before = wide_table.view()
        wide_table.go_left()
        assert wide_table.offset == 0
        assert wide_table.view() == before

    def test_right_is_bounded_by_content_width(self, wide_table: Table) -> None:
        for _ in range(10):
            wide_table.go_right()

        assert wide_table.offset == 3
        stable = wide_table.view()
        assert stable == lines("NAME ", "alice", "bob  ")

        wide_table.go_right()
        assert wide_table.view() == stable

    def test_left_scrolls_back(self, wide_table: Table) -> None:
        initial = wide_table.view()
        for _ in range(3):
            wide_table.go_right()
        for _ in range(3):
            wide_table.go_left()
        assert wide_table.offset == 0
        assert wide_table.view() == initial

    def test_widening_clamps_offset(self, wide_table: Table) -> None:
        for _ in range(3):
            wide_table.go_right()
        wide_table.set_size(7, 3)
        assert wide_table.offset == 1

    def test_right_keeps_leading_title_style(self) -> None:
        table = Table(["ID", "NAME"], 4, 3)
        table.set_rows([SimpleRow([1, "alice"])])
        table.go_right()
        assert table.view().startswith("\x1b[1m")

    def test_right_with_default_styles_cuts_whole_cells(self) -> None:
        table = Table(["ID", "NAME"], 4, 4)
        table.set_rows([SimpleRow([10, "alpha"])])
        table.go_right()

        body = table.view().split("\n")[1]
        assert strip_ansi(body) == "0 │ "
        assert printable_width(body) == 4

    def test_leading_only_cut_keeps_combined_cell_style(self) -> None:
        table = Table(["ID", "NAME"], 4, 4, config=TableConfig(preserve_all_escapes=False))
        table.set_rows([SimpleRow([10, "alpha"])])
        table.go_right()

        body = table.view().split("\n")[1]
        assert body.startswith("\x1b[1;38;5;170m")
        assert strip_ansi(body) == "0 │ "

    def test_styled_scroll_matches_plain_scroll(self) -> None:
        rows = [SimpleRow([10, "alpha"]), SimpleRow([2, "日本語"]), SimpleRow([300, "b"])]
        styled = Table(["ID", "NAME"], 4, 4)
        plain = Table(["ID", "NAME"], 4, 4, styles=Styles(column_separator="│ "))
        for table in (styled, plain):
            table.set_rows(rows)
            table.go_down()

        widths = []
        while True:
            assert [strip_ansi(line) for line in styled.view().split("\n")] == plain.view().split("\n")
            widths.append([printable_width(line) for line in styled.viewport.lines])
            if styled.offset == styled.content_width - styled.width:
                break
            styled.go_right()
            plain.go_right()

        assert len(widths) > 1
        for before, after in zip(widths, widths[1:]):
            assert all(a >= b for a, b in zip(before, after))


# ---------------------------------------------------------------------------
# Sizing
# ---------------------------------------------------------------------------


class TestSetSize:
    """Tests for resizing."""

    def test_resize_shrinks_window_past_cursor(self, item_table: Table) -> None:
        assert item_table.view() == lines("  #     ", "> item 0", "  item 1", "  item 2")

        item_table.set_size(4, 5)
        item_table.go_bottom()
        item_table.set_size(0, 3)

        assert item_table.cursor == 7
        assert item_table.view() == lines("  #     ", "  item 6", "> item 7")

    def test_resize_logs_cursor_clamp(self, item_table: Table, caplog: pytest.LogCaptureFixture) -> None:
        item_table.go_bottom()
        with caplog.at_level(logging.DEBUG, logger="scrolltable"):
            item_table.set_size(0, 2)
        assert any("moves cursor" in r.getMessage() for r in caplog.records)

    def test_resize_keeps_cursor_when_visible(self, numbered_table: Table) -> None:
        numbered_table.set_size(0, 10)
        assert numbered_table.cursor == 0
        assert numbered_table.height == 10
        assert numbered_table.viewport.height == 9


# ---------------------------------------------------------------------------
# Selection and events
# ---------------------------------------------------------------------------


class TestSelection:
    """Tests for selected row access."""

    def test_selected_row(self) -> None:
        table = Table(["  #"], 0, 4)
        rows = [SimpleRow([i]) for i in range(10)]
        table.set_rows(rows)

        assert table.selected_row() == rows[0]
        table.go_page_down()
        assert table.selected_row() == rows[3]

    def test_selected_row_is_none_without_rows(self) -> None:
        table = Table(["  #"], 0, 4)
        assert table.selected_row() is None

    def test_selected_row_is_none_when_cursor_out_of_range(self, numbered_table: Table) -> None:
        numbered_table.go_bottom()
        numbered_table.set_rows(numbered_rows(2))
        assert numbered_table.selected_row() is None

    def test_cursor_predicates(self, numbered_table: Table) -> None:
        assert numbered_table.cursor_is_at_top()
        numbered_table.go_bottom()
        assert numbered_table.cursor_is_at_bottom()
        numbered_table.set_rows(numbered_rows(3))
        assert numbered_table.cursor_is_past_bottom()


class TestUpdate:
    """Tests for event dispatch."""

    @pytest.mark.parametrize(
        ("key", "want_cursor"),
        [
            (KEY_END, 9),
            (KEY_HOME, 0),
            (KEY_PAGE_DOWN, 3),
            (KEY_PAGE_UP, 0),
            (KEY_DOWN, 1),
            (KEY_UP, 0),
            (Key(name="j", char="j"), 0),
        ],
    )
    def test_key_moves_cursor(self, key: Key, want_cursor: int) -> None:
        table = Table(["  #"], 0, 4)
        table.set_rows([SimpleRow([i]) for i in range(10)])

        got, cmd = table.update(key)

        assert got is table
        assert cmd is None
        assert got.cursor == want_cursor

    def test_unbound_key_is_ignored(self, numbered_table: Table) -> None:
        before = numbered_table.view()
        numbered_table.update(Key(name="x", char="x"))
        assert numbered_table.view() == before
        assert numbered_table.handle_input(Key(name="x", char="x")) is False

    def test_handle_input_reports_consumed(self, numbered_table: Table) -> None:
        assert numbered_table.handle_input(KEY_DOWN) is True
        assert numbered_table.cursor == 1

    def test_resize_event(self, item_table: Table) -> None:
        item_table.go_bottom()
        item_table.update(Resize(0, 3))
        assert item_table.cursor == 8
        assert item_table.height == 3

    def test_config_keybindings(self) -> None:
        config = TableConfig(keybindings={"down": ["ctrl+n"]})
        table = Table(["  #"], 0, 4, config=config)
        table.set_rows([SimpleRow([i]) for i in range(3)])

        table.update(Key(name="ctrl+n", char="n", ctrl=True))
        assert table.cursor == 1
        table.update(KEY_DOWN)
        assert table.cursor == 1
