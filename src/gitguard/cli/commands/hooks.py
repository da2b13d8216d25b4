"""
CLI commands for installing and removing the git hooks.

install-hooks and uninstall-hooks are also exposed as standalone console
scripts through gitguard.main.
"""

from pathlib import Path

import typer

from gitguard.cli import ui
from gitguard.infrastructure.hooks.installer import HookInstaller
from gitguard.shared.constants import MAX_FILE_SIZE, MIN_COMMIT_MSG_LENGTH
from gitguard.shared.domain.exceptions import GitGuardError, NotAGitRepositoryError
from gitguard.shared.infrastructure.config import settings
from gitguard.shared.utils.format import human_readable_size

app = typer.Typer(
    name="hooks",
    help="Install, remove and list the git hooks",
    no_args_is_help=True,
)

HOOK_DESCRIPTIONS = {
    "pre-commit": "Checks for large files, secrets, and debug statements",
    "pre-push": "Validates branch naming convention",
    "commit-msg": "Validates commit message quality",
}


def _hooks_source_dir(work_tree: Path) -> Path:
    # Relative to the working tree root, not the current directory
    return work_tree / settings.hooks_source_dir


def _confirm_overwrite(existing: list[str]) -> bool:
    ui.warning("The following hooks already exist:")
    for hook_name in existing:
        ui.bullet(hook_name)
    ui.blank()
    answer = ui.ask_yes_no("Do you want to overwrite them?", default=False)
    ui.blank()
    return answer


def print_usage_summary() -> None:
    ui.section("What happens now:")
    ui.blank()
    ui.info("Branch Name Validation")
    ui.detail(" When you push, branch names must follow:")
    for example in ("feature/your-description", "bugfix/your-description", "hotfix/your-description"):
        ui.bullet(example)
    ui.blank()
    ui.info("Commit Message Validation")
    ui.detail(" Commit messages must be:")
    ui.bullet(f"At least {MIN_COMMIT_MSG_LENGTH} characters long")
    ui.bullet("Descriptive (not just 'fix' or 'update')")
    ui.blank()
    ui.info("Pre-commit Checks")
    ui.detail(" Before committing, checks for:")
    ui.bullet(f"Large files (>{human_readable_size(MAX_FILE_SIZE)})")
    ui.bullet("Hardcoded secrets/passwords")
    ui.bullet("Debug statements")
    ui.blank()
    ui.section("To bypass a hook (use sparingly):")
    ui.detail("git commit --no-verify")
    ui.detail("git push --no-verify")
    ui.blank()


@app.command(name="install")
def install_hooks_cmd():
    """Install the pre-commit, pre-push and commit-msg hooks."""
    ui.header("Git Hooks Installation Script")
    ui.blank()

    try:
        git_dir = HookInstaller.require_git_dir()
    except NotAGitRepositoryError as e:
        ui.error(str(e))
        ui.detail("Please run this command from the project root")
        raise typer.Exit(1)

    source_dir = _hooks_source_dir(HookInstaller.find_work_tree() or Path.cwd())

    try:
        HookInstaller.require_source_dir(source_dir)

        ui.section("This will install the following git hooks:")
        for hook_name in HookInstaller.SUPPORTED_HOOKS:
            ui.bullet(f"- {HOOK_DESCRIPTIONS[hook_name]}", label=f"{hook_name:<11}")
        ui.blank()

        report = HookInstaller.install_hooks(
            source_dir=source_dir,
            git_dir=git_dir,
            confirm_overwrite=_confirm_overwrite,
        )
    except GitGuardError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    if report.cancelled:
        ui.warning("Installation cancelled")
        return

    ui.section("Installing hooks...")
    ui.blank()
    for result in report.results:
        if result.installed:
            ui.success(result.message)
        else:
            ui.warning(result.message)

    ui.blank()
    ui.header("Installation Complete!")
    ui.blank()
    ui.success(f"Installed {report.installed_count} git hook(s)")
    ui.blank()
    print_usage_summary()
    ui.success("Happy coding! 🚀")


@app.command(name="uninstall")
def uninstall_hooks_cmd():
    """Remove the hooks installed by gitguard."""
    ui.section("Uninstalling git hooks...")
    ui.blank()

    try:
        git_dir = HookInstaller.require_git_dir()
        report = HookInstaller.uninstall_hooks(git_dir)
    except GitGuardError as e:
        ui.error(f"Error: {e}")
        raise typer.Exit(1)

    for hook_name in report.removed:
        ui.success(f"Removed {hook_name}")

    ui.blank()
    if report.removed_count > 0:
        ui.success(f"Successfully removed {report.removed_count} hook(s)")
    else:
        ui.warning("No hooks were installed")


@app.command(name="list")
def list_hooks_cmd():
    """List installed Git hooks status."""
    try:
        git_dir = HookInstaller.require_git_dir()
    except NotAGitRepositoryError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    for hook_name, is_installed in HookInstaller.list_hooks(git_dir).items():
        status = "✓ Installed" if is_installed else "✗ Not installed"
        color = "green" if is_installed else "dim"
        ui.console.print(f"{hook_name:15} {status}", style=color)