"""Strict YAML parsing into document trees."""

from __future__ import annotations

import logging
import re

import yaml

from yaml2md.exceptions import ParseError
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

logger = logging.getLogger(__name__)

_NULL_TAG = "tag:yaml.org,2002:null"
_BOOL_TAG = "tag:yaml.org,2002:bool"
_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"

# YAML 1.2 core schema: no yes/no/on/off booleans, no leading-zero octals,
# no sexagesimal numbers, no underscores in numbers, no implicit timestamps.
_CORE_IMPLICIT_RESOLVERS = [
    (
        _BOOL_TAG,
        re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
        list("tTfF"),
    ),
    (
        _INT_TAG,
        re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
        list("-+0123456789"),
    ),
    (
        _FLOAT_TAG,
        re.compile(
            r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
            |[-+]?\.(?:inf|Inf|INF)
            |\.(?:nan|NaN|NAN))$""",
            re.X,
        ),
        list("-+0123456789."),
    ),
    (
        _NULL_TAG,
        re.compile(r"^(?:~|null|Null|NULL|)$"),
        ["~", "n", "N", ""],
    ),
]


class _AliasReference(yaml.Node):
    """Placeholder composed in place of an ``*alias`` event."""

    id = "alias"

    def __init__(self, anchor, defined, start_mark=None, end_mark=None):
        super().__init__(None, anchor, start_mark, end_mark)
        self.defined = defined


class _TreeLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 core scalar resolution that keeps aliases as references."""

    yaml_implicit_resolvers: dict = {}

    def compose_node(self, parent, index):
        if self.check_event(yaml.AliasEvent):
            event = self.get_event()
            return _AliasReference(
                event.anchor,
                event.anchor in self.anchors,
                event.start_mark,
                event.end_mark,
            )
        return super().compose_node(parent, index)


for _tag, _regexp, _first in _CORE_IMPLICIT_RESOLVERS:
    _TreeLoader.add_implicit_resolver(_tag, _regexp, _first)


def parse_documents(text: str) -> list[TreeNode]:
    """Parse every YAML document in ``text``.

    The whole stream must be valid; a stream with no documents (empty or
    comments only) returns an empty list.

    Raises:
        ParseError: If the text is not valid YAML or nests too deeply to
            compose.
    """
    loader = _TreeLoader(text)
    try:
        documents: list[TreeNode] = []
        while loader.check_node():
            documents.append(_build_tree(loader.get_node()))
        return documents
    except yaml.YAMLError as exc:
        raise ParseError(str(exc)) from exc
    except RecursionError as exc:
        raise ParseError(f"document nests too deeply: {exc}") from exc
    finally:
        loader.dispose()


def _build_tree(node: yaml.Node) -> TreeNode:
    if isinstance(node, _AliasReference):
        if not node.defined:
            return MalformedNode(f"undefined alias {node.value!r}")
        return AliasNode(node.value)

    if isinstance(node, yaml.ScalarNode):
        return _build_scalar(node)

    if isinstance(node, yaml.SequenceNode):
        return SequenceNode(tuple(_build_tree(item) for item in node.value))

    if isinstance(node, yaml.MappingNode):
        # Repeated keys keep their first position and take the last value.
        pairs: dict[TreeNode, TreeNode] = {}
        for key_node, value_node in node.value:
            pairs[_build_tree(key_node)] = _build_tree(value_node)
        return MappingNode(tuple(pairs.items()))

    return MalformedNode(f"unexpected node {node.id}")


def _build_scalar(node: yaml.ScalarNode) -> TreeNode:
    try:
        if node.tag == _NULL_TAG:
            return NullNode()
        if node.tag == _BOOL_TAG:
            return BooleanNode(_core_bool(node.value))
        if node.tag == _INT_TAG:
            return IntegerNode(_core_int(node.value))
        if node.tag == _FLOAT_TAG:
            _core_float(node.value)
            return RealNode(node.value)
    except ValueError as exc:
        logger.debug("Bad %s scalar %r: %s", node.tag, node.value, exc)
        return MalformedNode(f"invalid {node.tag} value {node.value!r}")
    return TextNode(node.value)


def _core_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered not in ("true", "false"):
        raise ValueError(f"not a boolean: {value!r}")
    return lowered == "true"


def _core_int(value: str) -> int:
    if value.startswith("0o"):
        return int(value[2:], 8)
    if value.startswith("0x"):
        return int(value[2:], 16)
    return int(value, 10)


def _core_float(value: str) -> float:
    lowered = value.lower()
    if lowered.lstrip("+-") == ".inf":
        return float("-inf") if lowered.startswith("-") else float("inf")
    if lowered == ".nan":
        return float("nan")
    return float(value)
