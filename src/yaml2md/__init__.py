"""yaml2md: convert YAML document trees into Markdown posts."""

from yaml2md.batch import convert_tree
from yaml2md.exceptions import OutputError, ParseError, RenderError, Yaml2mdError
from yaml2md.loader import parse_documents
from yaml2md.processor import process_document
from yaml2md.recovery import recover
from yaml2md.renderer import render
from yaml2md.schemas import BatchSummary, ConversionResult, ConverterSettings, TreeNode

__all__ = [
    "BatchSummary",
    "ConversionResult",
    "ConverterSettings",
    "OutputError",
    "ParseError",
    "RenderError",
    "TreeNode",
    "Yaml2mdError",
    "convert_tree",
    "parse_documents",
    "process_document",
    "recover",
    "render",
]
