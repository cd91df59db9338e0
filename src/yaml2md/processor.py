"""Convert one parsed document into a Markdown post."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Callable

from yaml2md.exceptions import OutputError, RenderError
from yaml2md.front_matter import build_front_matter, extract_tags, extract_title
from yaml2md.git_dates import git_last_change_date
from yaml2md.paths import output_path_for
from yaml2md.renderer import render
from yaml2md.schemas import ConversionResult, ConverterSettings, FrontMatter, TreeNode

logger = logging.getLogger(__name__)

DateLookup = Callable[[Path], str | None]


def default_date_lookup(settings: ConverterSettings) -> DateLookup:
    """Date lookup backed by ``git log`` in the settings' repository."""
    return partial(
        git_last_change_date,
        repo_root=settings.repo_root,
        git_executable=settings.git_executable,
    )


def process_document(
    doc: TreeNode,
    source_path: Path,
    *,
    settings: ConverterSettings,
    date_lookup: DateLookup | None = None,
) -> ConversionResult:
    """Render ``doc`` with front matter and write it to the output directory.

    Title, tags and date fall back to their defaults when missing. An existing
    file with the same flattened name is overwritten.

    Args:
        doc: Parsed document tree.
        source_path: YAML file the document came from.
        settings: Resolved input, output and repository locations.
        date_lookup: Returns the last-change date of a path, or None.
            Defaults to querying git.

    Returns:
        Description of the written file.

    Raises:
        OutputError: If the output directory cannot be created or the file
            cannot be written.
        RenderError: If the document nests too deeply to render; nothing is
            written.
    """
    lookup = date_lookup or default_date_lookup(settings)
    front_matter = FrontMatter(
        title=extract_title(doc),
        tags=extract_tags(doc),
        date=lookup(source_path),
    )
    try:
        body = render(doc, 0)
    except RecursionError as exc:
        raise RenderError(
            f"Document from {source_path} nests too deeply: {exc}"
        ) from exc
    content = build_front_matter(front_matter) + body
    output_path = output_path_for(source_path, settings)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(
            f"Failed to create output directory {output_path.parent}: {exc}"
        ) from exc
    try:
        output_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Failed to write {output_path}: {exc}") from exc

    logger.info("Converted %s to %s", source_path, output_path)
    return ConversionResult(
        source_path=source_path,
        output_path=output_path,
        front_matter=front_matter,
        content=content,
    )
