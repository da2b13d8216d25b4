"""
Branch naming convention.

A branch is valid when it is one of the main branches or starts with a
known prefix followed by a slash and a non-empty description.
"""

import re

from gitguard.shared.constants import BRANCH_PREFIXES, MAIN_BRANCHES
from gitguard.validation.domain.result import ValidationResult

CHECK_ID = "branch-name"

_BRANCH_PATTERN = re.compile(rf"^({'|'.join(BRANCH_PREFIXES)})/.+", re.DOTALL)

BRANCH_GUIDE = [
    ("feature/", "description", "New features"),
    ("bugfix/", "description", "Bug fixes"),
    ("hotfix/", "description", "Critical production fixes"),
    ("docs/", "description", "Documentation updates"),
    ("refactor/", "description", "Code refactoring"),
    ("test/", "description", "Test updates"),
    ("chore/", "description", "Maintenance tasks"),
    ("release/", "version", "Release branches"),
]

BRANCH_EXAMPLES = [
    "feature/add-momentum-strategy",
    "bugfix/fix-calculation-error",
    "hotfix/critical-api-fix",
]


def is_valid_branch_name(branch_name: str) -> bool:
    """Return True if the name starts with a known prefix and has a suffix."""
    return bool(_BRANCH_PATTERN.match(branch_name))


def is_main_branch(branch_name: str | None) -> bool:
    return branch_name in MAIN_BRANCHES


def validate_branch_name(branch_name: str) -> ValidationResult:
    """
    Validate a branch name against the naming convention.

    Main branches are exempt. Anything else must match one of the
    prefixes listed in BRANCH_GUIDE.
    """
    result = ValidationResult()
    if is_main_branch(branch_name) or is_valid_branch_name(branch_name):
        return result

    result.fail(CHECK_ID, f"Branch name '{branch_name}' does not follow the naming convention")
    return result
