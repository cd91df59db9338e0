"""Document tree models.

A parsed YAML document is a tree of immutable nodes. The node classes form a
closed set; ``TreeNode`` is their union.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NullNode:
    """An explicit or implicit null scalar."""


@dataclass(frozen=True)
class BooleanNode:
    value: bool


@dataclass(frozen=True)
class IntegerNode:
    value: int


@dataclass(frozen=True)
class RealNode:
    """A float scalar, kept as its source text."""

    text: str


@dataclass(frozen=True)
class TextNode:
    value: str


@dataclass(frozen=True)
class SequenceNode:
    items: tuple["TreeNode", ...] = ()


@dataclass(frozen=True)
class MappingNode:
    """Ordered key/value pairs; keys are usually, but not always, text."""

    pairs: tuple[tuple["TreeNode", "TreeNode"], ...] = ()

    def get(self, key: str) -> "TreeNode | None":
        """Return the value stored under the text key ``key``, if any."""
        wanted = TextNode(key)
        for pair_key, value in self.pairs:
            if pair_key == wanted:
                return value
        return None


@dataclass(frozen=True)
class AliasNode:
    """An unresolved ``*alias`` reference."""

    anchor: str


@dataclass(frozen=True)
class MalformedNode:
    """Content that could not be constructed at this position."""

    reason: str = ""


TreeNode = Union[
    NullNode,
    BooleanNode,
    IntegerNode,
    RealNode,
    TextNode,
    SequenceNode,
    MappingNode,
    AliasNode,
    MalformedNode,
]

TREE_NODE_TYPES = (
    NullNode,
    BooleanNode,
    IntegerNode,
    RealNode,
    TextNode,
    SequenceNode,
    MappingNode,
    AliasNode,
    MalformedNode,
)
