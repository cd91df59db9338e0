"""Output path derivation."""

from __future__ import annotations

from pathlib import Path

from yaml2md.schemas.settings import ConverterSettings

_FLATTENED_CHARS = ("/", "\\", ".")


def flatten_output_name(source_path: Path, source_root: Path) -> str:
    """Flatten a source path into a single Markdown file name.

    The path relative to ``source_root`` loses its last extension, then every
    path separator and dot becomes an underscore: ``a/b.c.yaml`` gives
    ``a_b_c.md``. Distinct sources may flatten to the same name.

    Raises:
        ValueError: If ``source_path`` is not under ``source_root``.
    """
    relative = Path(source_path).relative_to(source_root)
    stem = str(relative.with_suffix("")) if relative.suffix else str(relative)
    for char in _FLATTENED_CHARS:
        stem = stem.replace(char, "_")
    return f"{stem}.md"


def output_path_for(source_path: Path, settings: ConverterSettings) -> Path:
    """Full output path for ``source_path`` under the settings' output directory."""
    return settings.output_dir / flatten_output_name(source_path, settings.input_root)
