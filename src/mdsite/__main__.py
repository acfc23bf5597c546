"""Module entry point for running with python -m mdsite."""

import sys

from mdsite.cli import main

if __name__ == "__main__":
    sys.exit(main())
