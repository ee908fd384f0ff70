"""Rebase and merge detection from the state files git keeps in its directory."""

from pathlib import Path
from typing import Optional

import git

from git_status_pane.models.git_state import MergeStatus, RebaseStatus
from git_status_pane.logging_config import get_logger

logger = get_logger(__name__)

REBASE_STATE_DIRS = ("rebase-merge", "rebase-apply")


def describe_commit(repo: git.Repo, hexsha: str) -> str:
    """
    Name a commit for display.

    Args:
        repo: Repository
        hexsha: Full commit hash

    Returns:
        Name of a local branch pointing at the commit, else the short hash
    """
    for head in repo.heads:
        try:
            if head.commit.hexsha == hexsha:
                return head.name
        except ValueError:
            # Branch ref pointing at a missing object
            continue
    return hexsha[:7]


def _read_state_file(path: Path) -> str:
    return path.read_text().strip()


def read_rebase_status(repo: git.Repo) -> Optional[RebaseStatus]:
    """Return the rebase in progress, if any."""
    git_dir = Path(repo.git_dir)
    for dirname in REBASE_STATE_DIRS:
        state_dir = git_dir / dirname
        head_file = state_dir / "head-name"
        onto_file = state_dir / "onto"
        if not head_file.is_file() or not onto_file.is_file():
            continue
        # rebase-apply is shared with `git am`
        if (state_dir / "applying").exists():
            continue

        head_name = _read_state_file(head_file)
        if head_name.startswith("refs/heads/"):
            head_name = head_name[len("refs/heads/"):]
        onto = describe_commit(repo, _read_state_file(onto_file))
        logger.debug(f"Rebase in progress ({dirname}): {head_name} onto {onto}")
        return RebaseStatus(head_name=head_name, onto=onto)
    return None


def read_merge_status(repo: git.Repo) -> Optional[MergeStatus]:
    """Return the merge in progress, if any."""
    merge_head = Path(repo.git_dir) / "MERGE_HEAD"
    if not merge_head.is_file():
        return None

    lines = _read_state_file(merge_head).splitlines()
    if not lines:
        return None
    head = describe_commit(repo, lines[0].strip())
    logger.debug(f"Merge in progress: {head}")
    return MergeStatus(head=head)
