"""Shared schemas for yaml2md."""

from yaml2md.schemas.results import BatchSummary, ConversionResult, FrontMatter
from yaml2md.schemas.settings import ConverterSettings
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

__all__ = [
    "AliasNode",
    "BatchSummary",
    "BooleanNode",
    "ConversionResult",
    "ConverterSettings",
    "FrontMatter",
    "IntegerNode",
    "MalformedNode",
    "MappingNode",
    "NullNode",
    "RealNode",
    "SequenceNode",
    "TextNode",
    "TreeNode",
]
