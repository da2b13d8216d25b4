"""Tests for git metadata queries."""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gitguard.git.repository import (
    get_current_branch,
    get_repo_root,
    get_staged_files,
    is_file_staged,
)


def _completed(returncode=0, stdout="", stderr=""):
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


def test_current_branch():
    with patch("subprocess.run", return_value=_completed(stdout="feature/login\n")) as mock_run:
        assert get_current_branch() == "feature/login"

    assert mock_run.call_args.args[0] == ["git", "symbolic-ref", "--short", "HEAD"]


def test_detached_head_has_no_branch():
    failure = _completed(returncode=128, stderr="fatal: ref HEAD is not a symbolic ref")
    with patch("subprocess.run", return_value=failure):
        assert get_current_branch() is None


def test_missing_git_binary():
    with patch("subprocess.run", side_effect=FileNotFoundError("git")):
        assert get_current_branch() is None
        assert get_staged_files() == []
        assert get_repo_root() is None


def test_staged_files_keep_git_order():
    output = "src/app.py\0README.md\0docs/guide.md\0"
    with patch("subprocess.run", return_value=_completed(stdout=output)) as mock_run:
        assert get_staged_files() == ["src/app.py", "README.md", "docs/guide.md"]

    assert "--diff-filter=ACM" in mock_run.call_args.args[0]
    assert "-z" in mock_run.call_args.args[0]


def test_is_file_staged():
    with patch("subprocess.run", return_value=_completed(stdout="a.py\0b.py\0")):
        assert is_file_staged("b.py")
        assert not is_file_staged("c.py")


def test_repo_root():
    with patch("subprocess.run", return_value=_completed(stdout="/work/project\n")):
        assert get_repo_root() == Path("/work/project")


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
def test_staged_non_ascii_and_spaced_names_come_back_verbatim(tmp_path):
    subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
    for name in ["café.py", "with space.py", "plain.py"]:
        (tmp_path / name).write_text("x = 1\n", encoding="utf-8")
    subprocess.run(["git", "add", "."], cwd=tmp_path, check=True)

    staged = get_staged_files(cwd=tmp_path)

    assert sorted(staged) == sorted(["café.py", "with space.py", "plain.py"])
    assert all((tmp_path / name).is_file() for name in staged)
