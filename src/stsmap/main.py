"""Entry-point for the path report CLI."""
from __future__ import annotations

import sys

from .presentation.cli.app import main as cli_main


def main() -> None:
    """Run the CLI presentation layer."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
