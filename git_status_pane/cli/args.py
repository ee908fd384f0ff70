"""Command-line argument parsing for git-status-pane."""

import argparse
from git_status_pane.__version__ import __version__
from git_status_pane.constants import DEFAULT_RECENT_COMMITS


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Show the status of a git repository: branch, changes and recent commits",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-status-pane {__version__}")
    parser.add_argument(
        "-C",
        dest="directory",
        default=".",
        metavar="PATH",
        help="Run as if started in PATH (default: current directory)",
    )
    parser.add_argument(
        "-n",
        "--recent-commits",
        type=int,
        default=DEFAULT_RECENT_COMMITS,
        metavar="N",
        help=f"Number of commits under 'Recent commits' (default: {DEFAULT_RECENT_COMMITS})",
    )
    parser.add_argument(
        "--interactive", action="store_true", help="Launch interactive TUI mode (default for TTY)"
    )
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Print the status once and exit (for scripts/automation)",
    )
    parser.add_argument(
        "--refresh-interval",
        type=float,
        metavar="SECONDS",
        help="Rebuild the TUI status periodically (default: only on 'g')",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
