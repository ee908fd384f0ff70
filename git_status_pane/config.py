"""Configuration handling for git-status-pane"""

from dataclasses import dataclass
from typing import Optional

from git_status_pane.constants import DEFAULT_RECENT_COMMITS


@dataclass
class Config:
    """Configuration for git-status-pane with validation."""

    # Number of entries shown under "Recent commits"
    recent_commits: int = DEFAULT_RECENT_COMMITS

    # Execution modes
    interactive: bool = True
    refresh_interval: Optional[float] = None  # Seconds between TUI rebuilds, None = manual only
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_recent_commits()
        self._validate_refresh_interval()

    def _validate_recent_commits(self):
        """Validate recent_commits is positive."""
        if self.recent_commits <= 0:
            raise ValueError(f"recent_commits must be positive, got {self.recent_commits}")

    def _validate_refresh_interval(self):
        """Validate refresh_interval is positive when set."""
        if self.refresh_interval is not None and self.refresh_interval <= 0:
            raise ValueError(f"refresh_interval must be positive, got {self.refresh_interval}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "recent_commits": self.recent_commits,
            "interactive": self.interactive,
            "refresh_interval": self.refresh_interval,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key, so services accept a Config or a plain dict."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "recent_commits",
            "interactive",
            "refresh_interval",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
