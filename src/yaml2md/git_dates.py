"""Look up last-change dates from git history."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from yaml2md.config import YAML2MD_GIT

logger = logging.getLogger(__name__)


def git_last_change_date(
    path: Path,
    *,
    repo_root: Path,
    git_executable: str = YAML2MD_GIT,
) -> str | None:
    """Return the committer date (YYYY-MM-DD) of the last commit touching ``path``.

    Runs ``git log -1 --format=%cs -- <path>`` from ``repo_root`` with the
    path given relative to it. Blocks until git exits.

    Args:
        path: File to look up; must lie under ``repo_root``.
        repo_root: Repository root used as the working directory.
        git_executable: Name or path of the git binary.

    Returns:
        The trimmed date string, or None when the path is outside the
        repository, git cannot be run, exits non-zero, or prints nothing
        (the file has no history).
    """
    try:
        relative_path = Path(path).relative_to(repo_root)
    except ValueError:
        logger.debug("%s is not under repository root %s", path, repo_root)
        return None

    try:
        result = subprocess.run(
            [git_executable, "log", "-1", "--format=%cs", "--", str(relative_path)],
            cwd=repo_root,
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        logger.debug("Could not run %s for %s: %s", git_executable, path, exc)
        return None

    if result.returncode != 0:
        logger.debug(
            "git log failed for %s (exit %d): %s",
            relative_path,
            result.returncode,
            result.stderr.strip(),
        )
        return None

    date = result.stdout.strip()
    return date or None
