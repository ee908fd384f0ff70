"""Shared constants for git-status-pane."""


class StyleTag:
    """Style tags carried by styled text, resolved to colors at render time."""

    SECTION = "section"
    UNTRACKED_FILE = "untracked_file"
    UNMERGED_FILE = "unmerged_file"
    FILE = "file"
    HUNK_HEADER = "hunk_header"
    DIFF_ADDED = "diff_added"
    DIFF_REMOVED = "diff_removed"
    OID = "oid"


# Theme colors (Rich color names)
THEME = {
    StyleTag.SECTION: "yellow",
    StyleTag.UNTRACKED_FILE: "red",
    StyleTag.UNMERGED_FILE: "red",
    StyleTag.FILE: "magenta",
    StyleTag.HUNK_HEADER: "blue",
    StyleTag.DIFF_ADDED: "green",
    StyleTag.DIFF_REMOVED: "red",
    StyleTag.OID: "yellow",
}

# Style applied to the row under the cursor in the TUI
CURSOR_STYLE = "reverse"


# Section labels
HEADER_UNTRACKED = "Untracked files"
HEADER_UNMERGED = "Unmerged"
HEADER_UNSTAGED = "Unstaged changes"
HEADER_STAGED = "Staged changes"
HEADER_RECENT_COMMITS = "Recent commits"

# Row identities for the head section
ID_REBASE_STATUS = "rebase_status"
ID_MERGE_STATUS = "merge_status"
ID_BRANCH_STATUS = "branch_status"
ID_UNTRACKED = "untracked"
ID_UNMERGED = "unmerged"


# Porcelain XY codes for conflicted paths
UNMERGED_STATUS_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})
UNTRACKED_STATUS_CODE = "??"

DEFAULT_RECENT_COMMITS = 5
