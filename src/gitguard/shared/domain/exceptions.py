"""
Domain exceptions for gitguard.

Environment problems (no repository, no hook source) are exceptions.
Validation failures and advisory findings are results, never exceptions.
All application errors inherit from GitGuardError.
"""


class GitGuardError(Exception):
    """Base class for all gitguard exceptions."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class NotAGitRepositoryError(GitGuardError):
    """Raised when no .git directory can be found."""

    pass


class HookSourceMissingError(GitGuardError):
    """Raised when the directory holding the hook scripts does not exist."""

    pass


class InstallError(GitGuardError):
    """Raised when copying or removing a hook file fails."""

    pass
