"""Parsers for git command output."""

import re
from typing import List, Optional

from git_status_pane.models.git_state import BranchStatus, FileEntry, Hunk, Status

# "main...origin/main [ahead 1, behind 2]"
BRANCH_HEADER_RE = re.compile(
    r"^(?P<local>[^\s.]\S*?)(?:\.\.\.(?P<remote>\S+))?(?: \[(?P<tracking>[^\]]*)\])?$"
)
UNBORN_PREFIXES = ("No commits yet on ", "Initial commit on ")
DETACHED_HEADER = "HEAD (no branch)"


def parse_branch_header(header: str) -> BranchStatus:
    """
    Parse the `## ...` line of `git status --porcelain --branch`.

    Args:
        header: Line with or without the leading "## "

    Returns:
        BranchStatus with local/remote names and ahead/behind counts
    """
    if header.startswith("## "):
        header = header[3:]
    header = header.strip()

    if header == DETACHED_HEADER:
        return BranchStatus()

    for prefix in UNBORN_PREFIXES:
        if header.startswith(prefix):
            return BranchStatus(local=header[len(prefix):])

    match = BRANCH_HEADER_RE.match(header)
    if not match:
        raise ValueError(f"Unrecognized branch header: {header!r}")

    status = BranchStatus(local=match.group("local"), remote=match.group("remote"))
    tracking = match.group("tracking")
    if tracking:
        for part in tracking.split(","):
            part = part.strip()
            if part.startswith("ahead "):
                status.ahead = int(part[len("ahead "):])
            elif part.startswith("behind "):
                status.behind = int(part[len("behind "):])
    return status


def parse_status_porcelain(output: str) -> Status:
    """
    Parse `git status --porcelain --branch -z` output.

    Entries are NUL separated. Renames and copies are followed by an extra
    entry holding the source path.
    """
    tokens = [token for token in output.split("\0") if token]
    status = Status()

    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if token.startswith("## "):
            status.branch_status = parse_branch_header(token)
            continue

        if len(token) < 4:
            continue

        entry = FileEntry(path=token[3:], index_status=token[0], worktree_status=token[1])
        if entry.index_status in "RC" or entry.worktree_status in "RC":
            if index < len(tokens):
                entry.orig_path = tokens[index]
                index += 1
        status.files.append(entry)

    return status


def parse_hunks(file_header: str, patch: str) -> List[Hunk]:
    """
    Split the body of a file patch into its `@@` hunks.

    Args:
        file_header: Header of the changed file the hunks belong to
        patch: Patch text following the file header, as GitPython reports it

    Returns:
        Hunks in patch order, empty for binary or mode-only changes
    """
    hunks: List[Hunk] = []
    header: Optional[str] = None
    lines: List[str] = []

    for line in patch.rstrip("\n").split("\n"):
        if line.startswith("@@"):
            if header is not None:
                hunks.append(Hunk(file_header, header, "\n".join(lines)))
            header, lines = line, []
        elif header is not None:
            lines.append(line)

    if header is not None:
        hunks.append(Hunk(file_header, header, "\n".join(lines)))
    return hunks
