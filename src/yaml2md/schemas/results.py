"""Conversion output models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class FrontMatter(BaseModel):
    """Metadata written ahead of each post. ``None`` fields take defaults."""

    title: str | None = None
    tags: list[str] | None = None
    date: str | None = None


class ConversionResult(BaseModel):
    """One written Markdown document."""

    source_path: Path
    output_path: Path
    front_matter: FrontMatter
    content: str


class BatchSummary(BaseModel):
    """Counters for a batch run."""

    files_attempted: int = 0
    documents_converted: int = 0
    files_recovered: int = 0
    files_skipped: int = 0
    documents_failed: int = 0
    outputs: list[Path] = Field(default_factory=list)
