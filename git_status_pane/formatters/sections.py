"""Section assembly: separator and header rows in front of a section body."""

from typing import List, Optional, Sequence

from git_status_pane.constants import StyleTag
from git_status_pane.models.row import Row, StyledText


def blank_line() -> Row:
    """Unselectable empty separator row."""
    return Row(identity="", display=StyledText.of(""), depth=0, is_selectable=False)


def section_header(label: str, count: Optional[int] = None, identity: Optional[str] = None) -> Row:
    """
    Bold section header row.

    Args:
        label: Header text
        count: If given, appended as " (count)"
        identity: Row identity, defaults to the label

    Returns:
        Depth 0 section header row
    """
    text = label if count is None else f"{label} ({count})"
    return Row(
        identity=label if identity is None else identity,
        display=StyledText.of(text, StyleTag.SECTION, bold=True),
        depth=0,
        is_section_header=True,
    )


def section_header_rows(label: str, count: Optional[int] = None, identity: Optional[str] = None) -> List[Row]:
    """Separator followed by the header."""
    return [blank_line(), section_header(label, count, identity)]


def assemble_section(
    label: str,
    body: Sequence[Row],
    count: Optional[int] = None,
    identity: Optional[str] = None,
) -> List[Row]:
    """
    Prefix a section body with a separator and a header.

    An empty body yields no rows at all.
    """
    if not body:
        return list(body)
    return section_header_rows(label, count, identity) + list(body)
