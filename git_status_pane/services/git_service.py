"""Read-only repository queries"""
import git
from contextlib import contextmanager
from typing import Optional, Union, TYPE_CHECKING

from git_status_pane.constants import DEFAULT_RECENT_COMMITS
from git_status_pane.exceptions import RepositoryQueryFailed
from git_status_pane.logging_config import get_logger
from git_status_pane.models.git_state import Diff, MergeStatus, RebaseStatus, Status
from git_status_pane.services.git.diffs import read_staged_diff, read_unstaged_diff
from git_status_pane.services.git.parsers import parse_status_porcelain
from git_status_pane.services.git.state import read_merge_status, read_rebase_status

if TYPE_CHECKING:
    from git_status_pane.config import Config

logger = get_logger(__name__)


class GitService:
    """Service for the repository queries behind the status pane.

    Every failure is raised as RepositoryQueryFailed; nothing is retried or
    degraded to partial data.
    """

    def __init__(self, repo_path: str, config: Union['Config', dict]):
        """Initialize the service.

        Args:
            repo_path: Path to the working directory (string path, not repo object)
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.recent_commits = config.get('recent_commits', DEFAULT_RECENT_COMMITS)
        logger.info("Git service initialized")

    def _get_repo(self) -> git.Repo:
        """Open the repository.

        GitPython repos are lightweight, a fresh instance per query keeps each
        build independent of the previous one.
        """
        return git.Repo(self.repo_path, search_parent_directories=True)

    @contextmanager
    def _query(self, operation: str):
        """Context manager turning git and filesystem errors into RepositoryQueryFailed."""
        try:
            yield
        except (git.exc.GitError, OSError, ValueError) as e:
            logger.debug(f"Error during {operation} in {self.repo_path}: {e}")
            raise RepositoryQueryFailed(operation, str(e)) from e

    def status(self) -> Status:
        """Working tree status with branch tracking information."""
        with self._query("status"):
            repo = self._get_repo()
            output = repo.git.status("--porcelain", "--branch", "-z")
            status = parse_status_porcelain(output)
        logger.debug(f"Status: {len(status.files)} files, branch {status.branch_status}")
        return status

    def rebase_status(self) -> Optional[RebaseStatus]:
        """The rebase in progress, or None."""
        with self._query("rebase_status"):
            return read_rebase_status(self._get_repo())

    def merge_status(self) -> Optional[MergeStatus]:
        """The merge in progress, or None."""
        with self._query("merge_status"):
            return read_merge_status(self._get_repo())

    def diff_unstaged(self) -> Diff:
        """Changes in the working tree not yet staged."""
        with self._query("diff_unstaged"):
            diff = read_unstaged_diff(self._get_repo())
        logger.debug(f"Unstaged diff: {len(diff.deltas)} deltas")
        return diff

    def diff_staged(self) -> Diff:
        """Changes staged in the index."""
        with self._query("diff_staged"):
            diff = read_staged_diff(self._get_repo())
        logger.debug(f"Staged diff: {len(diff.deltas)} deltas")
        return diff

    def log_recent(self) -> str:
        """One line per recent commit, `git log --oneline` style."""
        with self._query("log_recent"):
            repo = self._get_repo()
            if not repo.head.is_valid():
                logger.debug("No commits yet, log is empty")
                return ""
            return repo.git.log(
                "-n", str(self.recent_commits), "--oneline", "--decorate", "--no-color"
            )
