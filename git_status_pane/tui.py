"""Interactive status pane using Textual."""

from typing import List, Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.geometry import Region
from textual.widgets import Footer, Header, Static

from .config import Config
from .core import StatusBuilder
from .exceptions import GitStatusPaneError
from .logging_config import get_logger
from .models.row import Row
from .rendering import render_rows

logger = get_logger(__name__)


def next_selectable(rows: Sequence[Row], index: Optional[int], step: int) -> Optional[int]:
    """
    Move from ``index`` to the next selectable row in direction ``step``.

    Returns:
        New cursor index, ``index`` unchanged if there is nothing further
    """
    position = -1 if index is None and step > 0 else (len(rows) if index is None else index)
    position += step
    while 0 <= position < len(rows):
        if rows[position].is_selectable:
            return position
        position += step
    return index


def restore_cursor(rows: Sequence[Row], identity: Optional[str]) -> Optional[int]:
    """Find the selectable row with ``identity``, falling back to the first selectable row."""
    if identity is not None:
        for index, row in enumerate(rows):
            if row.is_selectable and row.identity == identity:
                return index
    return next_selectable(rows, None, 1)


def line_offset(rows: Sequence[Row], index: int) -> int:
    """Screen line on which row ``index`` starts."""
    return sum(row.display.plain.count("\n") + 1 for row in rows[:index])


class StatusApp(App):
    """Full screen status pane."""

    TITLE = "git-status-pane"

    CSS = """
    #status-pane {
        width: 100%;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("j,down", "cursor_down", "Down", show=False),
        Binding("k,up", "cursor_up", "Up", show=False),
        Binding("g", "refresh", "Refresh"),
    ]

    def __init__(self, builder: StatusBuilder, config: Config):
        super().__init__()
        self.builder = builder
        self.status_config = config
        self.rows: List[Row] = []
        self.cursor: Optional[int] = None
        self.sub_title = builder.repo_path

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="status-scroll"):
            yield Static(id="status-pane")
        yield Footer()

    def on_mount(self) -> None:
        self.rebuild()
        if self.status_config.refresh_interval:
            self.set_interval(self.status_config.refresh_interval, self.rebuild)

    def rebuild(self) -> None:
        """Replace all rows. On failure the previous rows stay on screen."""
        try:
            rows = self.builder.build()
        except GitStatusPaneError as e:
            logger.warning(f"Refresh failed: {e}")
            self.notify(str(e), title="Refresh failed", severity="error")
            return

        identity = self.rows[self.cursor].identity if self.cursor is not None else None
        self.rows = rows
        self.cursor = restore_cursor(rows, identity)
        self._update_display()

    def _update_display(self) -> None:
        self.query_one("#status-pane", Static).update(render_rows(self.rows, self.cursor))
        if self.cursor is not None:
            top = line_offset(self.rows, self.cursor)
            height = self.rows[self.cursor].display.plain.count("\n") + 1
            self.query_one("#status-scroll", VerticalScroll).scroll_to_region(
                Region(0, top, 1, height), animate=False
            )

    def action_cursor_down(self) -> None:
        self.cursor = next_selectable(self.rows, self.cursor, 1)
        self._update_display()

    def action_cursor_up(self) -> None:
        self.cursor = next_selectable(self.rows, self.cursor, -1)
        self._update_display()

    def action_refresh(self) -> None:
        self.rebuild()
