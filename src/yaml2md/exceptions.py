"""Custom exceptions for yaml2md."""


class Yaml2mdError(Exception):
    """Base exception for yaml2md operations."""


class ParseError(Yaml2mdError):
    """Error during strict YAML parsing."""


class OutputError(Yaml2mdError):
    """Error creating the output directory or writing a Markdown file."""


class RenderError(Yaml2mdError):
    """Error rendering a document tree as Markdown."""
