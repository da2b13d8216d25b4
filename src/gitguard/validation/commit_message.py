"""
Commit message quality checks.

Too-short messages block the commit. Generic one-word messages such as
"fix" or "update" are only warned about; the whole message must match for
the warning to fire.
"""

import re

from gitguard.shared.constants import GENERIC_COMMIT_PATTERN, MIN_COMMIT_MSG_LENGTH
from gitguard.validation.domain.result import ValidationResult

LENGTH_CHECK_ID = "commit-message-length"
GENERIC_CHECK_ID = "commit-message-generic"

_GENERIC_PATTERN = re.compile(GENERIC_COMMIT_PATTERN, re.IGNORECASE)
_SCISSORS = "# ------------------------ >8 ------------------------"


def clean_commit_message(raw: str) -> str:
    """
    Strip what git itself would drop from the message.

    Removes comment lines, everything below the verbose-mode scissors
    line, and surrounding whitespace.
    """
    lines = []
    for line in raw.splitlines():
        if line.startswith(_SCISSORS):
            break
        if line.startswith("#"):
            continue
        lines.append(line)
    return "\n".join(lines).strip()


def is_generic_commit_message(message: str) -> bool:
    return bool(_GENERIC_PATTERN.match(message.strip()))


def validate_commit_message(raw: str) -> ValidationResult:
    """
    Validate a commit message.

    Checks, in order:
    1. Length of the cleaned message is at least MIN_COMMIT_MSG_LENGTH (blocking)
    2. Message is not a generic word like "fix" or "wip" (warning)
    """
    result = ValidationResult()
    message = clean_commit_message(raw)

    if len(message) < MIN_COMMIT_MSG_LENGTH:
        result.fail(
            LENGTH_CHECK_ID,
            f"Commit message too short ({len(message)} characters, minimum {MIN_COMMIT_MSG_LENGTH})",
        )

    if is_generic_commit_message(message):
        result.warn(GENERIC_CHECK_ID, f"Commit message '{message}' is too generic")

    return result
