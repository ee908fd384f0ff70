"""Tests for Rich rendering and TUI cursor movement"""
from rich.style import Style

from git_status_pane.constants import StyleTag, THEME
from git_status_pane.formatters import blank_line, section_header
from git_status_pane.models.row import Row, Span, StyledText
from git_status_pane.rendering import render_rows, to_rich_text
from git_status_pane.tui import line_offset, next_selectable, restore_cursor


def _row(identity, selectable=True, text=None):
    return Row(identity=identity, display=StyledText.of(text or identity), depth=1, is_selectable=selectable)


class TestToRichText:
    def test_styles_resolved_through_theme(self):
        text = to_rich_text(StyledText((Span("abc1234", StyleTag.OID), Span(" message"))))

        assert text.plain == "abc1234 message"
        assert text.spans[0].style == Style(color=THEME[StyleTag.OID])

    def test_bold(self):
        text = to_rich_text(StyledText.of("Recent commits", StyleTag.SECTION, bold=True))

        assert text.spans[0].style.bold is True

    def test_custom_theme(self):
        text = to_rich_text(StyledText.of("x", StyleTag.FILE), theme={StyleTag.FILE: "cyan"})

        assert text.spans[0].style.color.name == "cyan"


class TestRenderRows:
    def test_one_line_per_row(self):
        rows = [section_header("Recent commits"), blank_line(), _row("abc")]

        assert render_rows(rows).plain == "Recent commits\n\nabc"

    def test_multi_line_rows(self):
        rows = [_row("a", text="one\ntwo"), _row("b")]

        assert render_rows(rows).plain == "one\ntwo\nb"


class TestCursor:
    """Test cursor movement over selectable rows."""

    def test_skips_unselectable_rows(self):
        rows = [_row("a"), blank_line(), _row("b")]

        assert next_selectable(rows, 0, 1) == 2
        assert next_selectable(rows, 2, -1) == 0

    def test_stays_at_edges(self):
        rows = [_row("a"), _row("b", selectable=False)]

        assert next_selectable(rows, 0, 1) == 0
        assert next_selectable(rows, 0, -1) == 0

    def test_from_no_cursor(self):
        rows = [blank_line(), _row("a"), _row("b")]

        assert next_selectable(rows, None, 1) == 1
        assert next_selectable(rows, None, -1) == 2
        assert next_selectable([], None, 1) is None

    def test_restore_by_identity(self):
        rows = [_row("a"), _row("b"), _row("c")]

        assert restore_cursor(rows, "c") == 2
        assert restore_cursor(rows, "gone") == 0
        assert restore_cursor(rows, None) == 0

    def test_line_offset_counts_multi_line_rows(self):
        rows = [_row("a", text="one\ntwo"), _row("b"), _row("c")]

        assert line_offset(rows, 0) == 0
        assert line_offset(rows, 2) == 3
