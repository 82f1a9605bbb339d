"""Command-line front door for fileexplorer.

Parses CLI options, merges them with persisted config, and resolves the
start directory. Then runs the interactive explorer loop on stdin.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .repl import ExplorerRepl
from .session import Session


def _configure_logging(debug: bool) -> None:
    """Send DEBUG records to stderr when ``--debug`` is given; stay silent otherwise."""
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _color_enabled(no_color: bool) -> bool:
    """Resolve color output from ``--no-color``, config, then TTY detection."""
    if no_color:
        return False
    preference = config.load_color()
    if preference is not None:
        return preference
    return sys.stdout.isatty()


def main(default_path: Path | None = None) -> int:
    """Parse CLI arguments and run the explorer REPL.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used as the session start directory.
    """
    parser = argparse.ArgumentParser(
        description="Interactive file explorer: list, search, preview, and edit the filesystem."
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument("--style", default=None, help="Pygments style name for cathead/cattail output.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--debug", action="store_true", help="Log skipped entries and fallbacks to stderr.")
    args = parser.parse_args()

    _configure_logging(args.debug)

    start = args.path or default_path
    if start is not None:
        start = Path(start)
        if not start.is_dir():
            raise SystemExit(f"Not a directory: {start}")

    interactive = sys.stdin.isatty()
    repl = ExplorerRepl(
        Session(start),
        prompt=config.load_prompt() if interactive else "",
        banner=interactive,
        color=_color_enabled(args.no_color),
        style=args.style or config.load_style_name(),
    )
    try:
        return repl.run(sys.stdin)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 0


if __name__ == "__main__":
    sys.exit(main())
