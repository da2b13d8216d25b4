"""
Validation rules applied by the git hooks.

Each validator is a pure function over explicit input returning a
ValidationResult; printing and exit codes belong to gitguard.hooks.
"""

from gitguard.validation.branch import is_main_branch, is_valid_branch_name, validate_branch_name
from gitguard.validation.commit_message import is_generic_commit_message, validate_commit_message
from gitguard.validation.content import contains_debug, contains_secrets, scan_file, scan_files
from gitguard.validation.domain.result import Finding, Severity, ValidationResult

__all__ = [
    "Finding",
    "Severity",
    "ValidationResult",
    "contains_debug",
    "contains_secrets",
    "is_generic_commit_message",
    "is_main_branch",
    "is_valid_branch_name",
    "scan_file",
    "scan_files",
    "validate_branch_name",
    "validate_commit_message",
]
