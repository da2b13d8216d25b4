"""Tests for the pre-commit hook runner."""

import shutil
import subprocess
from unittest.mock import patch

import pytest

from gitguard.hooks import pre_commit


def test_no_staged_files(tmp_path, capsys):
    assert pre_commit.run(staged=[], root=tmp_path) == 0
    assert "No staged files" in capsys.readouterr().out


def test_clean_files_pass(tmp_path, capsys):
    (tmp_path / "app.py").write_text("def run():\n    return 1\n")

    assert pre_commit.run(staged=["app.py"], root=tmp_path) == 0
    assert "All pre-commit checks passed" in capsys.readouterr().out


def test_secret_blocks_commit_and_lists_every_file(tmp_path, capsys):
    (tmp_path / "config.py").write_text('password = "abc123"\n')
    (tmp_path / "client.py").write_text('api_key = "xyz"\n')
    (tmp_path / "ui.js").write_text('console.log("x")\n')

    code = pre_commit.run(staged=["config.py", "client.py", "ui.js"], root=tmp_path)

    out = capsys.readouterr().out
    assert code == 1
    assert "config.py:1: Hardcoded password detected" in out
    assert "client.py:1: Hardcoded API key detected" in out
    assert "ui.js:1: Debug statement found: console.log" in out
    assert "Commit blocked: 2 problem(s) found" in out


def test_debug_statement_only_warns(tmp_path, capsys):
    (tmp_path / "ui.js").write_text('console.log("x")\n')

    assert pre_commit.run(staged=["ui.js"], root=tmp_path) == 0
    assert "1 warning(s) found, commit allowed" in capsys.readouterr().out


def test_staged_files_and_root_come_from_git(tmp_path):
    (tmp_path / "notes.md").write_text("# Notes\n")

    with patch("gitguard.hooks.pre_commit.get_repo_root", return_value=tmp_path), \
         patch("gitguard.hooks.pre_commit.get_staged_files", return_value=["notes.md"]) as mock_staged:
        assert pre_commit.main() == 0

    mock_staged.assert_called_once_with(cwd=tmp_path)


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
def test_secret_in_non_ascii_file_name_blocks_commit(tmp_path, capsys):
    subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
    (tmp_path / "café.py").write_text('password = "abc123"\n', encoding="utf-8")
    subprocess.run(["git", "add", "café.py"], cwd=tmp_path, check=True)

    code = pre_commit.run(root=tmp_path)

    out = capsys.readouterr().out
    assert code == 1
    assert "café.py:1: Hardcoded password detected" in out
