"""Data models for git-status-pane."""

from .row import (
    Span,
    StyledText,
    Row,
    FileTarget,
    DeltaTarget,
    HunkTarget,
    CommitTarget,
)
from .git_state import (
    FileEntry,
    BranchStatus,
    Status,
    RebaseStatus,
    MergeStatus,
    Hunk,
    Delta,
    Diff,
)
from .head_state import (
    NoBranch,
    OnBranch,
    Tracking,
    Rebasing,
    Merging,
    BranchSummary,
    branch_state_from_status,
)

__all__ = [
    "Span",
    "StyledText",
    "Row",
    "FileTarget",
    "DeltaTarget",
    "HunkTarget",
    "CommitTarget",
    "FileEntry",
    "BranchStatus",
    "Status",
    "RebaseStatus",
    "MergeStatus",
    "Hunk",
    "Delta",
    "Diff",
    "NoBranch",
    "OnBranch",
    "Tracking",
    "Rebasing",
    "Merging",
    "BranchSummary",
    "branch_state_from_status",
]
