"""Rich rendering of styled rows."""
from typing import Mapping, Optional, Sequence

from rich.style import Style
from rich.text import Text

from git_status_pane.constants import CURSOR_STYLE, THEME
from git_status_pane.models.row import Row, StyledText


def to_rich_text(styled: StyledText, theme: Mapping[str, str] = THEME) -> Text:
    """Resolve style tags through the theme."""
    text = Text()
    for span in styled.spans:
        color = theme.get(span.style) if span.style else None
        text.append(span.text, style=Style(color=color, bold=span.bold or None))
    return text


def render_rows(rows: Sequence[Row], cursor: Optional[int] = None) -> Text:
    """Render rows one per line, highlighting the row at ``cursor``."""
    lines = []
    for index, row in enumerate(rows):
        line = to_rich_text(row.display)
        if index == cursor:
            line.stylize(CURSOR_STYLE)
        lines.append(line)
    return Text("\n").join(lines)
