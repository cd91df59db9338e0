"""Tests for converter settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from yaml2md.schemas import ConverterSettings


class TestConverterSettings:
    """Tests for ConverterSettings model."""

    def test_for_repository_resolves_relative_directories(self, tmp_path: Path) -> None:
        settings = ConverterSettings.for_repository(tmp_path, input_dir="docs/yaml")

        root = tmp_path.resolve()
        assert settings.repo_root == root
        assert settings.input_root == root / "docs" / "yaml"
        assert settings.output_dir == root / "content" / "posts"

    def test_from_working_directory_uses_parent(self, tmp_path: Path) -> None:
        workdir = tmp_path / "preprocess"
        workdir.mkdir()

        settings = ConverterSettings.from_working_directory(workdir)

        assert settings.repo_root == tmp_path.resolve()
        assert settings.input_root == tmp_path.resolve() / "contracts"

    def test_is_frozen(self, tmp_path: Path) -> None:
        settings = ConverterSettings.for_repository(tmp_path)

        with pytest.raises(ValidationError):
            settings.pattern = "*.yml"
