"""Logging setup for the yaml2md command line."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def configure_logging(verbosity: int = 1) -> None:
    """Configure root logging on stderr.

    0 shows warnings and errors, 1 adds per-file progress, 2 or more adds
    debug output (recovery attempts, git failures).
    """
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
