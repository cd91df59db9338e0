"""Render document trees as heading-structured Markdown."""

from __future__ import annotations

from yaml2md.schemas.tree import (
    AliasNode,
    BooleanNode,
    IntegerNode,
    MalformedNode,
    MappingNode,
    NullNode,
    RealNode,
    SequenceNode,
    TextNode,
    TreeNode,
)
from yaml2md.text_utils import split_lines

INDENT = "    "
MAX_HEADING_LEVEL = 6


def render(node: TreeNode, depth: int = 0) -> str:
    """Render ``node`` as Markdown text.

    Mapping keys become headings one level below their parent, capped at
    ``MAX_HEADING_LEVEL``. Text is indented by ``INDENT`` per depth level.
    Every emitted line ends with a line break.

    Args:
        node: The tree to render.
        depth: Nesting depth of ``node``; 0 for a document root.

    Returns:
        The rendered Markdown text.
    """
    if isinstance(node, NullNode):
        return "null\n"

    if isinstance(node, BooleanNode):
        return "true\n" if node.value else "false\n"

    if isinstance(node, IntegerNode):
        return f"{node.value}\n"

    if isinstance(node, RealNode):
        return f"{node.text}\n"

    if isinstance(node, TextNode):
        return _render_text(node.value, depth)

    if isinstance(node, SequenceNode):
        return "".join(render(item, depth) for item in node.items)

    if isinstance(node, MappingNode):
        return "".join(
            _render_heading(key, depth) + render(value, depth + 1)
            for key, value in node.pairs
        )

    if isinstance(node, AliasNode):
        return "Alias\n"

    if isinstance(node, MalformedNode):
        return "Bad Value\n"

    raise TypeError(f"Cannot render {type(node).__name__} as a document tree")


def heading_level(depth: int) -> int:
    """Heading level used for mapping keys found at ``depth``."""
    return min(depth + 1, MAX_HEADING_LEVEL)


def key_text(key: TreeNode) -> str:
    """Heading text for a mapping key; non-text keys use their repr."""
    if isinstance(key, TextNode):
        return key.value
    return repr(key)


def _render_heading(key: TreeNode, depth: int) -> str:
    return f"\n{'#' * heading_level(depth)} {key_text(key)}  \n\n"


def _render_text(value: str, depth: int) -> str:
    prefix = INDENT * depth
    lines = split_lines(value) or [""]
    return "".join(f"{prefix}{line}\n" for line in lines)
