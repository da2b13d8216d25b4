"""
Git metadata queries used by the hooks.

All calls go through `git` on PATH. A missing binary or a failing command
is logged and reported as "no value" so the calling hook can decide.
"""

import subprocess
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


def _git(*args: str, cwd: str | Path | None = None) -> str | None:
    """Run a git command and return stdout, or None on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            # Paths are raw bytes from the index; keep undecodable ones round-trippable
            encoding="utf-8",
            errors="surrogateescape",
            check=False,
            cwd=cwd,
        )
    except FileNotFoundError:
        logger.warning("git_not_found", args=list(args))
        return None

    if result.returncode != 0:
        logger.debug(
            "git_command_failed",
            args=list(args),
            returncode=result.returncode,
            stderr=result.stderr.strip(),
        )
        return None

    return result.stdout


def get_current_branch(cwd: str | Path | None = None) -> str | None:
    """
    Return the short name of the checked-out branch.

    Returns:
        Branch name, or None when HEAD is detached or git fails.
    """
    output = _git("symbolic-ref", "--short", "HEAD", cwd=cwd)
    if output is None:
        return None
    return output.strip() or None


def get_staged_files(cwd: str | Path | None = None) -> list[str]:
    """
    Return paths added, copied or modified in the index, in git's order.

    Uses -z so names with non-ASCII or special characters come back
    verbatim instead of quoted and octal-escaped.
    """
    output = _git("diff", "--cached", "--name-only", "--diff-filter=ACM", "-z", cwd=cwd)
    if output is None:
        return []
    return [path for path in output.split("\0") if path]


def is_file_staged(path: str, cwd: str | Path | None = None) -> bool:
    return path in get_staged_files(cwd=cwd)


def get_repo_root(cwd: str | Path | None = None) -> Path | None:
    """Return the top level of the working tree, or None outside a repository."""
    output = _git("rev-parse", "--show-toplevel", cwd=cwd)
    if output is None:
        return None
    return Path(output.strip())
