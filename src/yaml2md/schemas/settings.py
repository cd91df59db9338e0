"""Converter settings model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from yaml2md.config import (
    YAML2MD_GIT,
    YAML2MD_INPUT_DIR,
    YAML2MD_OUTPUT_DIR,
    YAML2MD_PATTERN,
)


class ConverterSettings(BaseModel):
    """Resolved locations for one conversion run.

    Attributes:
        repo_root: Repository root; git is queried from here.
        input_root: Directory searched for YAML files; output names are
            derived from paths relative to it.
        output_dir: Flat directory receiving the Markdown posts.
        pattern: Glob pattern matched under ``input_root``.
        git_executable: Name or path of the git binary.
    """

    model_config = ConfigDict(frozen=True)

    repo_root: Path
    input_root: Path
    output_dir: Path
    pattern: str = YAML2MD_PATTERN
    git_executable: str = YAML2MD_GIT

    @classmethod
    def for_repository(
        cls,
        repo_root: Path,
        *,
        input_dir: str | Path = YAML2MD_INPUT_DIR,
        output_dir: str | Path = YAML2MD_OUTPUT_DIR,
        pattern: str = YAML2MD_PATTERN,
        git_executable: str = YAML2MD_GIT,
    ) -> "ConverterSettings":
        """Build settings with directories resolved against ``repo_root``.

        Absolute ``input_dir``/``output_dir`` values are used unchanged.
        """
        root = Path(repo_root).expanduser().resolve()
        return cls(
            repo_root=root,
            input_root=root / Path(input_dir).expanduser(),
            output_dir=root / Path(output_dir).expanduser(),
            pattern=pattern,
            git_executable=git_executable,
        )

    @classmethod
    def from_working_directory(
        cls, cwd: Path | None = None, **overrides
    ) -> "ConverterSettings":
        """Settings for the default layout: the repository is the parent of ``cwd``."""
        current = Path(cwd) if cwd is not None else Path.cwd()
        return cls.for_repository(current.resolve().parent, **overrides)
