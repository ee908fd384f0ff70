"""File entry formatting."""

from typing import Iterable, List

from git_status_pane.models.git_state import FileEntry
from git_status_pane.models.row import FileTarget, Row, StyledText


def format_file_row(entry: FileEntry, style: str) -> Row:
    """
    Format a status entry as a selectable section member.

    Args:
        entry: File from the status query
        style: StyleTag accent for the path

    Returns:
        Depth 1 row targeting the file path
    """
    return Row(
        identity=entry.path,
        display=StyledText.of(entry.path, style, bold=True),
        depth=1,
        action_target=FileTarget(entry.path),
    )


def format_file_rows(entries: Iterable[FileEntry], style: str) -> List[Row]:
    """Format entries in the order given."""
    return [format_file_row(entry, style) for entry in entries]
