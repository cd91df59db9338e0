"""Module entry point for running with python -m yaml2md."""

import sys

from yaml2md.cli import main

if __name__ == "__main__":
    sys.exit(main())
