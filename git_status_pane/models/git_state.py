"""Repository state as reported by git"""
from dataclasses import dataclass, field
from typing import List, Optional

from git_status_pane.constants import UNMERGED_STATUS_CODES, UNTRACKED_STATUS_CODE


@dataclass
class FileEntry:
    """One path from `git status --porcelain`."""
    path: str
    index_status: str  # X column
    worktree_status: str  # Y column
    orig_path: Optional[str] = None  # Source path of a rename or copy

    @property
    def status_code(self) -> str:
        return self.index_status + self.worktree_status

    def is_untracked(self) -> bool:
        return self.status_code == UNTRACKED_STATUS_CODE

    def is_unmerged(self) -> bool:
        return self.status_code in UNMERGED_STATUS_CODES


@dataclass
class BranchStatus:
    """Current branch and how it compares to its upstream."""
    local: Optional[str] = None
    remote: Optional[str] = None
    ahead: int = 0
    behind: int = 0


@dataclass
class Status:
    """Working tree and index status."""
    files: List[FileEntry] = field(default_factory=list)
    branch_status: BranchStatus = field(default_factory=BranchStatus)


@dataclass
class RebaseStatus:
    """A rebase in progress."""
    head_name: str
    onto: str


@dataclass
class MergeStatus:
    """A merge in progress."""
    head: str


@dataclass
class Hunk:
    """One `@@` block of a changed file."""
    file_header: str
    header: str
    content: str


@dataclass
class Delta:
    """One changed file within a diff."""
    old_file: str
    new_file: str
    change_type: str = "M"  # A, D, M, R, C or T, as reported by git
    hunks: List[Hunk] = field(default_factory=list)

    @property
    def file_header(self) -> str:
        if self.old_file == self.new_file:
            return self.new_file
        return f"{self.old_file} -> {self.new_file}"


@dataclass
class Diff:
    """Ordered changed files of a diff."""
    deltas: List[Delta] = field(default_factory=list)
