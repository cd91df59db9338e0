"""Best-effort recovery of documents that fail strict parsing."""

from __future__ import annotations

import logging
from typing import Callable

from yaml2md.exceptions import ParseError
from yaml2md.loader import parse_documents
from yaml2md.schemas.tree import TreeNode
from yaml2md.text_utils import split_lines

logger = logging.getLogger(__name__)


def recover(
    raw_text: str,
    *,
    parse: Callable[[str], list[TreeNode]] = parse_documents,
) -> TreeNode | None:
    """Recover the first document from the shortest line prefix that parses.

    Lines are added one at a time and the accumulated text is parsed after
    each addition. Content after the first parsable prefix is dropped.

    Args:
        raw_text: Source text that failed strict parsing.
        parse: Strict parser; must raise ``ParseError`` on invalid input.

    Returns:
        The first document of the first prefix that yields one, or None if
        no prefix does.
    """
    content = ""
    for line_number, line in enumerate(split_lines(raw_text), start=1):
        content += line + "\n"
        try:
            documents = parse(content)
        except ParseError as exc:
            logger.debug("Prefix of %d line(s) does not parse: %s", line_number, exc)
            continue
        if documents:
            logger.debug("Recovered document from first %d line(s)", line_number)
            return documents[0]
    return None
