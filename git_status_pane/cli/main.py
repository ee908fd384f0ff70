"""Entry point for git-status-pane"""

import os
import sys
from rich.console import Console
from rich.markup import escape

from git_status_pane.cli.args import parse_args
from git_status_pane.config import Config
from git_status_pane.core import StatusBuilder
from git_status_pane.logging_config import setup_logging
from git_status_pane.rendering import render_rows

console = Console()


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        # Default to interactive if running in a TTY, unless explicitly disabled
        use_interactive = parsed_args.interactive or (
            sys.stdin.isatty() and sys.stdout.isatty() and not parsed_args.no_interactive
        )

        # The TUI owns the terminal, so logs go to a file
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug, tui_mode=use_interactive)

        config = Config(
            recent_commits=parsed_args.recent_commits,
            interactive=use_interactive,
            refresh_interval=parsed_args.refresh_interval,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug and not use_interactive:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        builder = StatusBuilder(os.path.abspath(parsed_args.directory), config)

        if use_interactive:
            from git_status_pane.tui import StatusApp
            StatusApp(builder, config).run()
        else:
            console.print(render_rows(builder.build()))

        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
