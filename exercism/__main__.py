"""Module entrypoint for `python -m exercism`."""

import sys

from exercism.cli import main

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
