"""Services for git-status-pane."""
