"""Test setup for yaml2md."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from yaml2md.schemas import ConverterSettings  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running git-backed tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests that run a real git binary",
    )


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Repository root with an empty contracts directory."""
    root = tmp_path / "repo"
    (root / "contracts").mkdir(parents=True)
    return root


@pytest.fixture
def settings(repo_root: Path) -> ConverterSettings:
    """Settings for the default repository layout under ``repo_root``."""
    return ConverterSettings.for_repository(repo_root)


@pytest.fixture
def no_date():
    """Date lookup for files without version-control history."""
    return lambda path: None
