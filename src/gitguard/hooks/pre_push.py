"""pre-push hook: enforces the branch naming convention."""

import sys
from pathlib import Path

import structlog
from rich.markup import escape

from gitguard.cli import ui
from gitguard.git.repository import get_current_branch
from gitguard.shared.infrastructure.logging import configure_logging
from gitguard.validation.branch import (
    BRANCH_EXAMPLES,
    BRANCH_GUIDE,
    is_main_branch,
    validate_branch_name,
)

logger = structlog.get_logger(__name__)


def print_branch_guide() -> None:
    ui.section("Branch naming convention:")
    for prefix, placeholder, description in BRANCH_GUIDE:
        ui.console.print(
            f"  [green]{escape(prefix)}[/green]{placeholder:<{22 - len(prefix)}}- {description}"
        )
    ui.blank()
    ui.section("Examples:")
    for example in BRANCH_EXAMPLES:
        ui.detail(example)


def run(branch: str | None = None, cwd: str | Path | None = None) -> int:
    if branch is None:
        branch = get_current_branch(cwd=cwd)

    if branch is None:
        ui.warning("Could not determine the current branch (detached HEAD?), skipping branch name check")
        return 0

    if is_main_branch(branch):
        ui.info(f"Pushing {branch}, branch name check skipped")
        return 0

    result = validate_branch_name(branch)
    if not result.passed:
        logger.info("branch_name_rejected", branch=branch)
        for finding in result.errors:
            ui.error(finding.message)
        ui.blank()
        print_branch_guide()
        return 1

    ui.success(f"Branch name '{branch}' follows the naming convention")
    return 0


def main() -> int:
    # git passes <remote-name> <remote-url>; only the local branch matters
    configure_logging()
    return run()


if __name__ == "__main__":
    sys.exit(main())
