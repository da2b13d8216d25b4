"""
gitguard - git hooks for branch naming, commit message quality and
staged content checks.
"""

__version__ = "0.1.0"
