"""
Git Hooks module.

Installs and removes the pre-commit, pre-push and commit-msg hooks.
"""

from gitguard.infrastructure.hooks.installer import (
    HookInstaller,
    HookInstallResult,
    InstallReport,
    UninstallReport,
)

__all__ = [
    "HookInstaller",
    "HookInstallResult",
    "InstallReport",
    "UninstallReport",
]
