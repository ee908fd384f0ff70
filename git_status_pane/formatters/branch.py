"""Head section formatting: branch tracking, rebase and merge rows."""

from typing import List

from git_status_pane.constants import (
    ID_BRANCH_STATUS,
    ID_MERGE_STATUS,
    ID_REBASE_STATUS,
    StyleTag,
)
from git_status_pane.models.git_state import BranchStatus
from git_status_pane.models.head_state import (
    BranchState,
    BranchSummary,
    HeadState,
    Merging,
    NoBranch,
    OnBranch,
    Rebasing,
    Tracking,
    branch_state_from_status,
)
from git_status_pane.models.row import Row, StyledText


def format_tracking_description(remote: str, ahead: int, behind: int) -> str:
    """
    Describe how the current branch compares to its upstream.

    Args:
        remote: Upstream name, e.g. "origin/main"
        ahead: Commits on the local branch missing from the upstream
        behind: Commits on the upstream missing from the local branch

    Returns:
        Human readable description, two lines when the branches diverged
    """
    if ahead == 0 and behind == 0:
        return f"Your branch is up to date with '{remote}'."
    if ahead > 0 and behind == 0:
        return f"Your branch is ahead of '{remote}' by {ahead} commit."
    if ahead == 0 and behind > 0:
        return f"Your branch is behind '{remote}' by {behind} commit."
    return (
        f"Your branch and '{remote}' have diverged,\n"
        f"and have {ahead} and {behind} different commits each, respectively."
    )


def _head_row(identity: str, text: str, section: bool = True, selectable: bool = True) -> Row:
    return Row(
        identity=identity,
        display=StyledText.of(text, StyleTag.SECTION, bold=True),
        depth=0,
        is_section_header=section,
        is_selectable=selectable,
    )


def branch_state_rows(branch: BranchState) -> List[Row]:
    """Rows for a classified branch state."""
    if isinstance(branch, NoBranch):
        return [_head_row(ID_BRANCH_STATUS, "No branch", selectable=False)]

    rows = [_head_row(ID_BRANCH_STATUS, f"On branch {branch.local}")]
    if isinstance(branch, Tracking):
        rows.append(
            Row(
                identity=ID_BRANCH_STATUS,
                display=StyledText.of(
                    format_tracking_description(branch.remote, branch.ahead, branch.behind)
                ),
                depth=1,
                is_selectable=False,
            )
        )
    return rows


def branch_status_rows(status: BranchStatus) -> List[Row]:
    """
    Rows describing the current branch and its upstream.

    Raises:
        InvariantViolation: if the status names a remote but no local branch
    """
    return branch_state_rows(branch_state_from_status(status))


def head_state_rows(head: HeadState) -> List[Row]:
    """Rows for the head section of the status pane."""
    if isinstance(head, Rebasing):
        return [
            _head_row(
                ID_REBASE_STATUS,
                f"Rebasing {head.head_name} onto {head.onto}",
                section=False,
                selectable=False,
            )
        ]
    if isinstance(head, Merging):
        return [_head_row(ID_MERGE_STATUS, f"Merging {head.head}", section=False, selectable=False)]
    if isinstance(head, BranchSummary):
        return branch_state_rows(head.branch)
    raise TypeError(f"Unknown head state: {head!r}")
