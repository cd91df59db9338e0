"""Shared text utilities."""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``, dropping the empty piece after a trailing break.

    A ``\\r`` left at the end of a line (CRLF input) is removed.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
