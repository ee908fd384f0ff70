"""Logging setup: Rich console output for one-shot runs, a log file for the TUI"""
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FILE = Path.home() / ".git-status-pane" / "git-status-pane.log"

_NAME_PREFIXES = ("git_status_pane.", "services.")


def _log_level(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False, debug: bool = False, tui_mode: bool = False) -> None:
    """
    Route log records for one run of the program.

    The TUI owns the terminal, so it only gets the log file. Printed runs log
    to stderr through Rich, and also to the file with --debug.
    """
    level = _log_level(verbose, debug)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.DEBUG if tui_mode else level)

    if tui_mode or debug:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE, mode="w")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s", datefmt="%H:%M:%S")
        )
        root_logger.addHandler(file_handler)

    if not tui_mode:
        console_handler = RichHandler(
            console=Console(stderr=True),
            level=level,
            show_time=debug,
            show_path=debug,
            markup=False,
            rich_tracebacks=debug,
        )
        console_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Logger named after the module, without the package path."""
    for prefix in _NAME_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
    return logging.getLogger(name)
