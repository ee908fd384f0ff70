"""Allow running as `python -m git_status_pane`."""
import sys

from git_status_pane.cli.main import main

sys.exit(main())
