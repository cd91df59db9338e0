"""Tests for single-document processing."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from yaml2md.exceptions import OutputError, RenderError
from yaml2md.loader import parse_documents
from yaml2md.processor import process_document
from yaml2md.schemas import ConverterSettings
from yaml2md.schemas.tree import IntegerNode, SequenceNode, TextNode


class TestProcessDocument:
    """Tests for process_document function."""

    def test_writes_front_matter_and_body(
        self, settings: ConverterSettings, no_date
    ) -> None:
        [doc] = parse_documents("info:\n  title: Hello\ntags: [a, b]\n")
        source = settings.input_root / "api" / "orders.v1.yaml"

        result = process_document(doc, source, settings=settings, date_lookup=no_date)

        expected_path = settings.output_dir / "api_orders_v1.md"
        assert result.output_path == expected_path
        assert expected_path.read_text(encoding="utf-8") == (
            "---\n"
            "title: Hello\n"
            "tags:\n"
            "  - a\n"
            "  - b\n"
            "date: Unknown\n"
            "---\n"
            "\n"
            "\n# info  \n\n"
            "\n## title  \n\n"
            "        Hello\n"
            "\n# tags  \n\n"
            "    a\n"
            "    b\n"
        )

    def test_scalar_document_has_no_heading(
        self, settings: ConverterSettings, no_date
    ) -> None:
        source = settings.input_root / "answer.yaml"

        result = process_document(
            IntegerNode(42), source, settings=settings, date_lookup=no_date
        )

        assert result.content == "---\ntitle: Untitled\ndate: Unknown\n---\n\n42\n"

    def test_uses_date_lookup(self, settings: ConverterSettings) -> None:
        source = settings.input_root / "a.yaml"
        lookup = MagicMock(return_value="2024-02-29")

        result = process_document(
            IntegerNode(1), source, settings=settings, date_lookup=lookup
        )

        lookup.assert_called_once_with(source)
        assert result.front_matter.date == "2024-02-29"
        assert "date: 2024-02-29\n" in result.content

    def test_defaults_to_git_lookup(self, settings: ConverterSettings) -> None:
        source = settings.input_root / "a.yaml"

        with patch("yaml2md.processor.git_last_change_date") as mock_git:
            mock_git.return_value = "2023-12-01"
            result = process_document(IntegerNode(1), source, settings=settings)

        mock_git.assert_called_once_with(
            source, repo_root=settings.repo_root, git_executable="git"
        )
        assert result.front_matter.date == "2023-12-01"

    def test_overwrites_existing_output(
        self, settings: ConverterSettings, no_date
    ) -> None:
        source = settings.input_root / "a.yaml"
        settings.output_dir.mkdir(parents=True)
        (settings.output_dir / "a.md").write_text("stale")

        process_document(IntegerNode(7), source, settings=settings, date_lookup=no_date)

        assert (settings.output_dir / "a.md").read_text(encoding="utf-8").endswith("7\n")

    def test_output_directory_failure_is_fatal(
        self, repo_root: Path, no_date
    ) -> None:
        blocker = repo_root / "content"
        blocker.write_text("not a directory")
        settings = ConverterSettings.for_repository(repo_root)

        with pytest.raises(OutputError, match="output directory"):
            process_document(
                IntegerNode(1),
                settings.input_root / "a.yaml",
                settings=settings,
                date_lookup=no_date,
            )

    def test_write_failure_is_fatal(
        self, settings: ConverterSettings, no_date
    ) -> None:
        (settings.output_dir / "a.md").mkdir(parents=True)

        with pytest.raises(OutputError, match="Failed to write"):
            process_document(
                IntegerNode(1),
                settings.input_root / "a.yaml",
                settings=settings,
                date_lookup=no_date,
            )

    def test_too_deep_document_is_not_written(
        self, settings: ConverterSettings, no_date
    ) -> None:
        doc = TextNode("leaf")
        for _ in range(5000):
            doc = SequenceNode((doc,))

        with pytest.raises(RenderError, match="nests too deeply"):
            process_document(
                doc,
                settings.input_root / "deep.yaml",
                settings=settings,
                date_lookup=no_date,
            )

        assert not (settings.output_dir / "deep.md").exists()
