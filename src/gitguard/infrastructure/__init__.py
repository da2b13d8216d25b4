"""
Infrastructure module for gitguard.

Installs the git hooks into a repository and removes them again.
"""

from gitguard.infrastructure.hooks.installer import HookInstaller

__all__ = [
    "HookInstaller",
]
