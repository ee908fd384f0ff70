"""Staged and unstaged diffs read through GitPython.

Each diff is queried twice: the raw ``-z`` listing gives exact paths and the
order of changed files, the patch listing gives the hunks of each file.
"""

from typing import Dict, Iterable, Tuple, Union

import git

from git_status_pane.logging_config import get_logger
from git_status_pane.models.git_state import Delta, Diff
from git_status_pane.services.git.parsers import parse_hunks

logger = get_logger(__name__)

# Object id of the empty tree, the staged base of a branch without commits
EMPTY_TREE_SHA = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"

UNMERGED_CHANGE_TYPE = "U"


def _paths(diff: git.Diff) -> Tuple[str, str]:
    old_file = diff.a_path or diff.b_path or ""
    new_file = diff.b_path or diff.a_path or ""
    return old_file, new_file


def _patch_text(diff: git.Diff) -> str:
    body = diff.diff or b""
    if isinstance(body, bytes):
        body = body.decode("utf-8", "replace")
    return body


def build_diff(raw_index: Iterable[git.Diff], patch_index: Iterable[git.Diff]) -> Diff:
    """
    Combine the raw and patch listings of one diff.

    Conflicted paths are left out, they are listed with the unmerged files.
    Files whose patch cannot be matched by path get no hunks; that only
    happens for mode-only changes, which have none.
    """
    patches: Dict[Tuple[str, str], str] = {}
    for patch in patch_index:
        patches[_paths(patch)] = _patch_text(patch)

    raw_index = list(raw_index)
    unmerged = {
        path
        for entry in raw_index
        if entry.change_type == UNMERGED_CHANGE_TYPE
        for path in _paths(entry)
    }

    diff = Diff()
    for entry in raw_index:
        old_file, new_file = _paths(entry)
        if old_file in unmerged or new_file in unmerged:
            continue
        delta = Delta(old_file=old_file, new_file=new_file, change_type=entry.change_type or "M")
        delta.hunks = parse_hunks(delta.file_header, patches.get((old_file, new_file), ""))
        diff.deltas.append(delta)
    return diff


def read_unstaged_diff(repo: git.Repo) -> Diff:
    """Working tree against the index."""
    return build_diff(repo.index.diff(None), repo.index.diff(None, create_patch=True))


def read_staged_diff(repo: git.Repo) -> Diff:
    """Index against HEAD, or against the empty tree before the first commit."""
    base: Union[str, git.Tree] = "HEAD"
    if not repo.head.is_valid():
        logger.debug("No commits yet, comparing the index with the empty tree")
        base = git.Tree(repo, bytes.fromhex(EMPTY_TREE_SHA))

    # R=True keeps HEAD on the old side, GitPython reverses index diffs otherwise
    return build_diff(
        repo.index.diff(base, R=True),
        repo.index.diff(base, R=True, create_patch=True),
    )
