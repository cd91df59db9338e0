"""Command-line entry point for yaml2md."""

from __future__ import annotations

import argparse
from pathlib import Path

from yaml2md.batch import convert_tree
from yaml2md.config import (
    YAML2MD_GIT,
    YAML2MD_INPUT_DIR,
    YAML2MD_OUTPUT_DIR,
    YAML2MD_PATTERN,
)
from yaml2md.exceptions import OutputError, Yaml2mdError
from yaml2md.schemas import ConverterSettings
from yaml2md.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yaml2md",
        description="Convert a tree of YAML documents into flat Markdown posts with front matter.",
    )
    parser.add_argument(
        "--repo-root",
        type=Path,
        help="Repository root (default: parent of the current directory)",
    )
    parser.add_argument(
        "--input-dir",
        default=YAML2MD_INPUT_DIR,
        help=f"YAML directory, relative to the repository root (default: {YAML2MD_INPUT_DIR})",
    )
    parser.add_argument(
        "--output-dir",
        default=YAML2MD_OUTPUT_DIR,
        help=f"Markdown output directory, relative to the repository root (default: {YAML2MD_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--pattern",
        default=YAML2MD_PATTERN,
        help=f"Glob pattern under the input directory (default: {YAML2MD_PATTERN})",
    )
    parser.add_argument(
        "--git",
        default=YAML2MD_GIT,
        dest="git_executable",
        help="git executable used for last-change dates",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show debug output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only show warnings and errors",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> ConverterSettings:
    options = {
        "input_dir": args.input_dir,
        "output_dir": args.output_dir,
        "pattern": args.pattern,
        "git_executable": args.git_executable,
    }
    if args.repo_root is not None:
        return ConverterSettings.for_repository(args.repo_root, **options)
    return ConverterSettings.from_working_directory(**options)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(0 if args.quiet else 1 + args.verbose)

    settings = resolve_settings(args)
    try:
        convert_tree(settings)
    except OutputError as exc:
        logger.error("Aborting: %s", exc)
        return 1
    except Yaml2mdError as exc:
        logger.error("Conversion failed: %s", exc)
        return 1
    return 0
