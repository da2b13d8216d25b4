"""Fixed limits and names shared by the hooks and the installer."""

# File size limit (10 MiB in bytes)
MAX_FILE_SIZE = 10 * 1024 * 1024

MIN_COMMIT_MSG_LENGTH = 10

BRANCH_PREFIXES = (
    "feature",
    "bugfix",
    "hotfix",
    "docs",
    "refactor",
    "test",
    "chore",
    "release",
)

MAIN_BRANCHES = ("main", "master")

# Warned against, never blocked
GENERIC_COMMIT_PATTERN = r"^(wip|test|fix|update|changes?)$"

# Installation order
HOOK_NAMES = ("pre-commit", "pre-push", "commit-msg")
