"""Local configuration for yaml2md."""

from __future__ import annotations

import os


DEFAULT_INPUT_DIR = "contracts"
DEFAULT_OUTPUT_DIR = "content/posts"
DEFAULT_PATTERN = "**/*.yaml"
DEFAULT_GIT_EXECUTABLE = "git"

DEFAULT_TITLE = "Untitled"
DEFAULT_DATE = "Unknown"

# Directories are relative to the repository root unless given as absolute paths.
YAML2MD_INPUT_DIR = os.getenv("YAML2MD_INPUT_DIR", DEFAULT_INPUT_DIR)
YAML2MD_OUTPUT_DIR = os.getenv("YAML2MD_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)
YAML2MD_PATTERN = os.getenv("YAML2MD_PATTERN", DEFAULT_PATTERN)
YAML2MD_GIT = os.getenv("YAML2MD_GIT", DEFAULT_GIT_EXECUTABLE)
