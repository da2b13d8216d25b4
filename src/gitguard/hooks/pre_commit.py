"""pre-commit hook: size, secret and debug-statement checks on staged files."""

import sys
from pathlib import Path

import structlog

from gitguard.cli import ui
from gitguard.git.repository import get_repo_root, get_staged_files
from gitguard.shared.infrastructure.logging import configure_logging
from gitguard.validation.content import scan_files
from gitguard.validation.domain.result import Finding

logger = structlog.get_logger(__name__)


def _describe(finding: Finding) -> str:
    location = finding.location
    return f"{location}: {finding.message}" if location else finding.message


def run(staged: list[str] | None = None, root: str | Path | None = None) -> int:
    if root is None:
        root = get_repo_root() or Path.cwd()
    if staged is None:
        staged = get_staged_files(cwd=root)

    if not staged:
        ui.info("No staged files to check")
        return 0

    ui.section(f"Running pre-commit checks on {len(staged)} file(s)...")
    result = scan_files(staged, root=root)

    for finding in result.errors:
        ui.error(_describe(finding))
    for finding in result.warnings:
        ui.warning(_describe(finding))

    logger.info(
        "pre_commit_finished",
        files=len(staged),
        errors=len(result.errors),
        warnings=len(result.warnings),
    )

    if not result.passed:
        ui.blank()
        ui.error(f"Commit blocked: {len(result.errors)} problem(s) found")
        ui.detail("Remove large files and move secrets to environment variables, then try again")
        return 1

    if result.warnings:
        ui.warning(f"{len(result.warnings)} warning(s) found, commit allowed")
        return 0

    ui.success("All pre-commit checks passed")
    return 0


def main() -> int:
    configure_logging()
    return run()


if __name__ == "__main__":
    sys.exit(main())
