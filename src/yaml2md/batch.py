"""Batch conversion of a YAML directory tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from yaml2md.exceptions import ParseError, RenderError
from yaml2md.loader import parse_documents
from yaml2md.processor import DateLookup, default_date_lookup, process_document
from yaml2md.recovery import recover
from yaml2md.schemas import BatchSummary, ConverterSettings

logger = logging.getLogger(__name__)

NO_FILES_MESSAGE = (
    "No files were processed. Please check the glob pattern and file locations."
)


def discover_sources(settings: ConverterSettings) -> Iterator[Path]:
    """Yield files matching the settings' pattern under the input root."""
    return settings.input_root.glob(settings.pattern)


def convert_tree(
    settings: ConverterSettings,
    *,
    date_lookup: DateLookup | None = None,
) -> BatchSummary:
    """Convert every matching YAML file under the input root.

    Files are handled one at a time in discovery order. Unreadable files and
    files that neither parse nor recover are logged and skipped.

    Raises:
        OutputError: If an output file cannot be written; the run stops.
    """
    lookup = date_lookup or default_date_lookup(settings)
    summary = BatchSummary()
    logger.info("Using glob pattern: %s", settings.input_root / settings.pattern)

    for path in discover_sources(settings):
        logger.info("Processing file: %s", path)
        summary.files_attempted += 1

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read %s: %s", path, exc)
            summary.files_skipped += 1
            continue

        try:
            documents = parse_documents(text)
        except ParseError as exc:
            logger.error("Failed to parse YAML in %s: %s", path, exc)
            recovered = recover(text)
            if recovered is None:
                logger.error("Could not recover content from %s", path)
                summary.files_skipped += 1
                continue
            logger.info("Recovered content from %s", path)
            summary.files_recovered += 1
            documents = [recovered]

        for doc in documents:
            try:
                result = process_document(
                    doc, path, settings=settings, date_lookup=lookup
                )
            except RenderError as exc:
                logger.error("Failed to render %s: %s", path, exc)
                summary.documents_failed += 1
                continue
            summary.documents_converted += 1
            summary.outputs.append(result.output_path)

    if summary.files_attempted == 0:
        logger.warning(NO_FILES_MESSAGE)
    else:
        logger.info("Processed %d file(s).", summary.files_attempted)
    return summary
