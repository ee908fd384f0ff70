"""Builds the rows of the status pane from repository state"""

from typing import List, Optional, Union, TYPE_CHECKING

from git_status_pane.constants import (
    HEADER_RECENT_COMMITS,
    HEADER_STAGED,
    HEADER_UNMERGED,
    HEADER_UNSTAGED,
    HEADER_UNTRACKED,
    ID_UNMERGED,
    ID_UNTRACKED,
    StyleTag,
)
from git_status_pane.formatters import (
    assemble_section,
    create_diff_rows,
    create_log_rows,
    format_file_rows,
    head_state_rows,
    section_header_rows,
)
from git_status_pane.logging_config import get_logger
from git_status_pane.models.git_state import Diff, Status
from git_status_pane.models.head_state import (
    BranchSummary,
    HeadState,
    Merging,
    Rebasing,
    branch_state_from_status,
)
from git_status_pane.models.row import Row
from git_status_pane.services.git_service import GitService

if TYPE_CHECKING:
    from git_status_pane.config import Config

logger = get_logger(__name__)


def create_status_section_rows(header: str, diff: Diff) -> List[Row]:
    """Diff section with the number of changed files in its header, omitted when empty."""
    return assemble_section(header, create_diff_rows(diff, 1), count=len(diff.deltas))


def create_log_section_rows(header: str, log: str) -> List[Row]:
    """Log section, present even when the log is empty."""
    return section_header_rows(header) + create_log_rows(log)


class StatusBuilder:
    """Assembles the status pane rows.

    Row order is fixed: head section, untracked files, unmerged files, unstaged
    changes, staged changes, recent commits.
    """

    def __init__(
        self,
        repo_path: str,
        config: Union["Config", dict],
        git_service: Optional[GitService] = None,
    ):
        self.repo_path = repo_path
        self.config = config
        self.git_service = git_service or GitService(repo_path, config)

    def resolve_head_state(self, status: Status) -> HeadState:
        """Rebase takes precedence over merge, which takes precedence over the branch summary."""
        rebase = self.git_service.rebase_status()
        if rebase is not None:
            return Rebasing(rebase.head_name, rebase.onto)

        merge = self.git_service.merge_status()
        if merge is not None:
            return Merging(merge.head)

        return BranchSummary(branch_state_from_status(status.branch_status))

    def build(self) -> List[Row]:
        """Build the full row sequence.

        Raises:
            RepositoryQueryFailed: if any repository query fails
            InvariantViolation: if the branch status is inconsistent
        """
        logger.debug(f"Building status rows for {self.repo_path}")
        status = self.git_service.status()
        untracked = [entry for entry in status.files if entry.is_untracked()]
        unmerged = [entry for entry in status.files if entry.is_unmerged()]

        rows = head_state_rows(self.resolve_head_state(status))
        rows += assemble_section(
            HEADER_UNTRACKED,
            format_file_rows(untracked, StyleTag.UNTRACKED_FILE),
            identity=ID_UNTRACKED,
        )
        rows += assemble_section(
            HEADER_UNMERGED,
            format_file_rows(unmerged, StyleTag.UNMERGED_FILE),
            identity=ID_UNMERGED,
        )
        rows += create_status_section_rows(HEADER_UNSTAGED, self.git_service.diff_unstaged())
        rows += create_status_section_rows(HEADER_STAGED, self.git_service.diff_staged())
        rows += create_log_section_rows(HEADER_RECENT_COMMITS, self.git_service.log_recent())

        logger.debug(f"Built {len(rows)} rows")
        return rows
