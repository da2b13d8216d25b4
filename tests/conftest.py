"""Shared test fixtures for gitguard test suite."""

import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

# Allow running the suite from a checkout without installing the package
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from gitguard.shared.constants import HOOK_NAMES  # noqa: E402
from gitguard.shared.infrastructure.logging import configure_logging  # noqa: E402


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    """Route structlog through stdlib logging at WARNING."""
    configure_logging()


@pytest.fixture
def cli_runner():
    """Fixture providing Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def hook_sources(tmp_path):
    """Create a .githooks directory with one launcher script per hook."""
    source_dir = tmp_path / ".githooks"
    source_dir.mkdir()
    for hook_name in HOOK_NAMES:
        (source_dir / hook_name).write_text(f"#!/usr/bin/env python3\n# {hook_name} source\n")
    return source_dir


@pytest.fixture
def git_repo(tmp_path, hook_sources, monkeypatch):
    """
    A working tree with .git/hooks and .githooks, used as the current directory.

    No real git objects are created; the installer only needs the layout.
    """
    (tmp_path / ".git" / "hooks").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def git_dir(git_repo):
    return git_repo / ".git"
