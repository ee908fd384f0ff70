"""Custom exceptions for git-status-pane"""

from typing import Optional


class GitStatusPaneError(Exception):
    """Base exception for all git-status-pane errors."""
    pass


class RepositoryQueryFailed(GitStatusPaneError):
    """Exception raised when a read-only repository query fails."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Repository query '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class InvariantViolation(GitStatusPaneError):
    """Exception raised when repository data is in a state that cannot occur."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Invariant violated: {message}")
