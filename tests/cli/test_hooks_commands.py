"""Unit tests for the hooks CLI commands.

Tests the hooks command group:
- install: copy hooks into .git/hooks with overwrite confirmation
- uninstall: remove installed hooks
- list: show installation status
"""

import os

from gitguard.main import app
from gitguard.shared.constants import HOOK_NAMES


def _hook_bytes(git_repo):
    hooks_dir = git_repo / ".git" / "hooks"
    return {name: (hooks_dir / name).read_bytes() for name in HOOK_NAMES}


class TestInstall:
    def test_install_into_fresh_repository(self, cli_runner, git_repo):
        result = cli_runner.invoke(app, ["hooks", "install"])

        assert result.exit_code == 0
        assert "Installed 3 git hook(s)" in result.stdout
        assert "Large files (>10MiB)" in result.stdout
        assert "git commit --no-verify" in result.stdout
        for name in HOOK_NAMES:
            assert os.access(git_repo / ".git" / "hooks" / name, os.X_OK)

    def test_declining_overwrite_exits_zero_and_changes_nothing(self, cli_runner, git_repo):
        cli_runner.invoke(app, ["hooks", "install"])
        before = _hook_bytes(git_repo)
        (git_repo / ".githooks" / "pre-commit").write_text("#!/bin/sh\nexit 0\n")

        result = cli_runner.invoke(app, ["hooks", "install"], input="n\n")

        assert result.exit_code == 0
        assert "The following hooks already exist" in result.stdout
        assert "Installation cancelled" in result.stdout
        assert _hook_bytes(git_repo) == before

    def test_empty_answer_defaults_to_no(self, cli_runner, git_repo):
        (git_repo / ".git" / "hooks" / "pre-push").write_text("mine")

        result = cli_runner.invoke(app, ["hooks", "install"], input="\n")

        assert result.exit_code == 0
        assert "Installation cancelled" in result.stdout
        assert (git_repo / ".git" / "hooks" / "pre-push").read_text() == "mine"

    def test_closed_stdin_defaults_to_no(self, cli_runner, git_repo):
        (git_repo / ".git" / "hooks" / "pre-push").write_text("mine")

        result = cli_runner.invoke(app, ["hooks", "install"], input="")

        assert result.exit_code == 0
        assert "Installation cancelled" in result.stdout
        assert (git_repo / ".git" / "hooks" / "pre-push").read_text() == "mine"

    def test_install_inside_submodule_targets_its_own_git_dir(self, cli_runner, git_repo, monkeypatch):
        module_git_dir = git_repo / ".git" / "modules" / "lib"
        (module_git_dir / "hooks").mkdir(parents=True)
        submodule = git_repo / "vendor" / "lib"
        (submodule / ".githooks").mkdir(parents=True)
        for name in HOOK_NAMES:
            (submodule / ".githooks" / name).write_text(f"# submodule {name}\n")
        (submodule / ".git").write_text("gitdir: ../../.git/modules/lib\n")
        monkeypatch.chdir(submodule)

        result = cli_runner.invoke(app, ["hooks", "install"])

        assert result.exit_code == 0
        assert (module_git_dir / "hooks" / "pre-commit").read_text() == "# submodule pre-commit\n"
        assert not (git_repo / ".git" / "hooks" / "pre-commit").exists()

    def test_accepting_overwrite_reinstalls(self, cli_runner, git_repo):
        (git_repo / ".git" / "hooks" / "pre-push").write_text("mine")

        result = cli_runner.invoke(app, ["hooks", "install"], input="y\n")

        assert result.exit_code == 0
        assert "Installed 3 git hook(s)" in result.stdout
        assert (git_repo / ".git" / "hooks" / "pre-push").read_text() != "mine"

    def test_not_a_git_repository(self, cli_runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            "gitguard.infrastructure.hooks.installer.HookInstaller.find_git_dir",
            staticmethod(lambda start_path=None: None),
        )

        result = cli_runner.invoke(app, ["hooks", "install"])

        assert result.exit_code == 1
        assert "Not in a git repository" in result.stdout

    def test_missing_hook_source_directory(self, cli_runner, git_repo):
        for name in HOOK_NAMES:
            (git_repo / ".githooks" / name).unlink()
        (git_repo / ".githooks").rmdir()

        result = cli_runner.invoke(app, ["hooks", "install"])

        assert result.exit_code == 1
        assert ".githooks directory not found" in result.stdout

    def test_missing_single_hook_is_warned(self, cli_runner, git_repo):
        (git_repo / ".githooks" / "commit-msg").unlink()

        result = cli_runner.invoke(app, ["hooks", "install"])

        assert result.exit_code == 0
        assert "Hook not found: commit-msg" in result.stdout
        assert "Installed 2 git hook(s)" in result.stdout


class TestUninstall:
    def test_uninstall_removes_hooks(self, cli_runner, git_repo):
        cli_runner.invoke(app, ["hooks", "install"])

        result = cli_runner.invoke(app, ["hooks", "uninstall"])

        assert result.exit_code == 0
        assert "Removed pre-commit" in result.stdout
        assert "Successfully removed 3 hook(s)" in result.stdout

    def test_uninstall_with_nothing_installed(self, cli_runner, git_repo):
        result = cli_runner.invoke(app, ["hooks", "uninstall"])

        assert result.exit_code == 0
        assert "No hooks were installed" in result.stdout

    def test_uninstall_outside_repository(self, cli_runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            "gitguard.infrastructure.hooks.installer.HookInstaller.find_git_dir",
            staticmethod(lambda start_path=None: None),
        )

        result = cli_runner.invoke(app, ["hooks", "uninstall"])

        assert result.exit_code == 1
        assert "Not in a git repository" in result.stdout


def test_list_hooks(cli_runner, git_repo):
    (git_repo / ".git" / "hooks" / "pre-commit").write_text("x")

    result = cli_runner.invoke(app, ["hooks", "list"])

    assert result.exit_code == 0
    assert "pre-commit" in result.stdout
    assert "✓ Installed" in result.stdout
    assert "✗ Not installed" in result.stdout


def test_version(cli_runner):
    result = cli_runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "gitguard" in result.stdout
