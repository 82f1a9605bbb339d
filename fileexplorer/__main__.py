"""Module entrypoint for ``python -m fileexplorer``.

All argument parsing and session setup happen in ``fileexplorer.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
