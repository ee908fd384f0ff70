"""Flatten diffs and commit logs into rows."""

from typing import List

from git_status_pane.constants import StyleTag
from git_status_pane.models.git_state import Delta, Diff, Hunk
from git_status_pane.models.row import (
    CommitTarget,
    DeltaTarget,
    HunkTarget,
    Row,
    Span,
    StyledText,
)


def format_hunk_content(content: str) -> StyledText:
    """Color hunk lines by their +/- prefix."""
    spans = []
    lines = content.split("\n")
    for index, line in enumerate(lines):
        if index < len(lines) - 1:
            line += "\n"
        if line.startswith("+"):
            spans.append(Span(line, StyleTag.DIFF_ADDED))
        elif line.startswith("-"):
            spans.append(Span(line, StyleTag.DIFF_REMOVED))
        else:
            spans.append(Span(line))
    return StyledText(tuple(spans))


def create_hunk_rows(hunk: Hunk, depth: int) -> List[Row]:
    """Hunk header followed by its content block."""
    identity = f"{hunk.file_header}\n{hunk.header}"
    return [
        Row(
            identity=identity,
            display=StyledText.of(hunk.header, StyleTag.HUNK_HEADER),
            depth=depth,
            is_section_header=True,
            action_target=HunkTarget(hunk.file_header, hunk.header),
        ),
        Row(
            identity=identity,
            display=format_hunk_content(hunk.content),
            depth=depth + 1,
            is_selectable=False,
        ),
    ]


def create_delta_rows(delta: Delta, depth: int) -> List[Row]:
    rows = [
        Row(
            identity=delta.file_header,
            display=StyledText.of(delta.new_file, StyleTag.FILE, bold=True),
            depth=depth,
            is_section_header=True,
            action_target=DeltaTarget(delta.old_file, delta.new_file),
        )
    ]
    for hunk in delta.hunks:
        rows.extend(create_hunk_rows(hunk, depth + 1))
    return rows


def create_diff_rows(diff: Diff, base_depth: int) -> List[Row]:
    """
    Flatten a diff into rows.

    Each delta becomes a file row at ``base_depth``, each of its hunks a header
    row one level deeper, followed by the hunk content two levels deeper.
    """
    rows: List[Row] = []
    for delta in diff.deltas:
        rows.extend(create_delta_rows(delta, base_depth))
    return rows


def create_log_rows(log: str) -> List[Row]:
    """
    Flatten `git log --oneline` text into one row per commit.

    Lines are split at the first space into hash and summary.
    """
    rows = []
    for line in log.splitlines():
        if not line.strip():
            continue
        reference, _, rest = line.partition(" ")
        rows.append(
            Row(
                identity=reference,
                display=StyledText((Span(reference, StyleTag.OID), Span(" "), Span(rest))),
                depth=1,
                action_target=CommitTarget(reference),
            )
        )
    return rows
