"""
git-status-pane - The status screen of a terminal git client
"""

from .__version__ import __version__
from .core import StatusBuilder
from .cli.main import main

__all__ = ["StatusBuilder", "main", "__version__"]
