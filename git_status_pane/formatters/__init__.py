"""Formatting utilities for git-status-pane.

This package turns repository state into rows, organized into logical modules:
- branch: Head section (branch tracking, rebase and merge)
- files: Untracked and unmerged file entries
- sections: Separator and header rows
- items: Diff and log flattening
"""

# Head section formatters
from .branch import (
    format_tracking_description,
    branch_state_rows,
    branch_status_rows,
    head_state_rows,
)

# File formatters
from .files import format_file_row, format_file_rows

# Section formatters
from .sections import (
    blank_line,
    section_header,
    section_header_rows,
    assemble_section,
)

# Flatteners
from .items import (
    format_hunk_content,
    create_diff_rows,
    create_log_rows,
)

__all__ = [
    # Head section
    "format_tracking_description",
    "branch_state_rows",
    "branch_status_rows",
    "head_state_rows",
    # Files
    "format_file_row",
    "format_file_rows",
    # Sections
    "blank_line",
    "section_header",
    "section_header_rows",
    "assemble_section",
    # Flatteners
    "format_hunk_content",
    "create_diff_rows",
    "create_log_rows",
]
