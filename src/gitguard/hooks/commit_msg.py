"""commit-msg hook: blocks short messages and warns about generic ones."""

import sys
from pathlib import Path

import structlog

from gitguard.cli import ui
from gitguard.shared.constants import MIN_COMMIT_MSG_LENGTH
from gitguard.shared.infrastructure.logging import configure_logging
from gitguard.validation.commit_message import validate_commit_message

logger = structlog.get_logger(__name__)


def run(message_file: str | Path) -> int:
    path = Path(message_file)
    try:
        raw = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error("commit_message_unreadable", path=str(path), error=str(e))
        ui.error(f"Cannot read commit message file: {path}")
        return 1

    result = validate_commit_message(raw)

    for finding in result.errors:
        ui.error(finding.message)
        ui.detail(f"Commit messages must be at least {MIN_COMMIT_MSG_LENGTH} characters long")
        ui.detail("Describe what changed, e.g. 'Add momentum strategy backtest'")

    for finding in result.warnings:
        ui.warning(finding.message)
        ui.detail("Consider describing what changed and why")

    if not result.passed:
        return 1

    if not result.warnings:
        ui.success("Commit message looks good")
    return 0


def main() -> int:
    configure_logging()
    if len(sys.argv) < 2:
        ui.error("Usage: commit-msg <message-file>")
        return 1
    return run(sys.argv[1])


if __name__ == "__main__":
    sys.exit(main())
