"""Git-related helpers for git-status-pane."""

from .parsers import parse_branch_header, parse_status_porcelain, parse_hunks
from .diffs import build_diff, read_unstaged_diff, read_staged_diff
from .state import describe_commit, read_rebase_status, read_merge_status

__all__ = [
    "parse_branch_header",
    "parse_status_porcelain",
    "parse_hunks",
    "build_diff",
    "read_unstaged_diff",
    "read_staged_diff",
    "describe_commit",
    "read_rebase_status",
    "read_merge_status",
]
