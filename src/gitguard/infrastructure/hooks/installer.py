"""
Git hooks installer for gitguard.

Copies the hook scripts from the project's hook-source directory into
.git/hooks and removes them again.
"""

import shutil
import stat
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from gitguard.shared.constants import HOOK_NAMES
from gitguard.shared.domain.exceptions import (
    HookSourceMissingError,
    InstallError,
    NotAGitRepositoryError,
)

logger = structlog.get_logger(__name__)

_EXECUTABLE = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass
class HookInstallResult:
    """Result of hook installation."""

    hook_name: str
    installed: bool
    message: str
    already_existed: bool = False


@dataclass
class InstallReport:
    """Outcome of one install run."""

    results: list[HookInstallResult] = field(default_factory=list)
    existing: list[str] = field(default_factory=list)
    cancelled: bool = False

    @property
    def installed_count(self) -> int:
        return sum(1 for r in self.results if r.installed)


@dataclass
class UninstallReport:
    """Outcome of one uninstall run."""

    removed: list[str] = field(default_factory=list)

    @property
    def removed_count(self) -> int:
        return len(self.removed)


class HookInstaller:
    """Manages Git hooks installation for gitguard."""

    SUPPORTED_HOOKS = HOOK_NAMES

    @staticmethod
    def find_work_tree(start_path: Path | None = None) -> Path | None:
        """
        Find the working tree root by traversing up from start_path.

        The first directory holding a .git entry wins, whether that entry
        is a directory or a gitdir file (submodules, linked worktrees).

        Args:
            start_path: Starting directory (default: current directory)

        Returns:
            Working tree root or None
        """
        if start_path is None:
            start_path = Path.cwd()

        current = start_path.resolve()

        while True:
            if (current / ".git").exists():
                return current
            if current == current.parent:
                return None
            current = current.parent

    @staticmethod
    def resolve_git_dir(dot_git: Path) -> Path | None:
        """
        Resolve a .git entry to the directory that holds the hooks.

        A "gitdir: <path>" file is followed, relative paths being taken
        from the file's directory. A linked worktree's gitdir carries a
        commondir file pointing at the shared repository, which is where
        git looks for hooks.

        Returns:
            Path to the git directory, or None if dot_git does not lead to one
        """
        if dot_git.is_dir():
            return dot_git
        if not dot_git.is_file():
            return None

        try:
            content = dot_git.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("gitdir_file_unreadable", path=str(dot_git), error=str(e))
            return None

        prefix = "gitdir:"
        if not content.startswith(prefix):
            logger.warning("gitdir_file_invalid", path=str(dot_git))
            return None

        git_dir = (dot_git.parent / content[len(prefix):].strip()).resolve()

        commondir = git_dir / "commondir"
        if commondir.is_file():
            try:
                git_dir = (git_dir / commondir.read_text(encoding="utf-8").strip()).resolve()
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("commondir_unreadable", path=str(commondir), error=str(e))
                return None

        if not git_dir.is_dir():
            logger.warning("gitdir_target_missing", path=str(dot_git), target=str(git_dir))
            return None
        return git_dir

    @staticmethod
    def find_git_dir(start_path: Path | None = None) -> Path | None:
        """
        Find the git directory for the working tree containing start_path.

        Discovery stops at the nearest .git entry; an enclosing repository
        is never used in place of a submodule or worktree that fails to
        resolve.

        Args:
            start_path: Starting directory (default: current directory)

        Returns:
            Path to the git directory or None
        """
        work_tree = HookInstaller.find_work_tree(start_path)
        if work_tree is None:
            return None
        return HookInstaller.resolve_git_dir(work_tree / ".git")

    @staticmethod
    def require_git_dir(start_path: Path | None = None) -> Path:
        """Like find_git_dir, but raise NotAGitRepositoryError when absent."""
        git_dir = HookInstaller.find_git_dir(start_path)
        if git_dir is None:
            raise NotAGitRepositoryError(
                "Not in a git repository",
                context={"start_path": str(start_path or Path.cwd())},
            )
        return git_dir

    @staticmethod
    def require_source_dir(source_dir: Path) -> Path:
        """Raise HookSourceMissingError unless source_dir is a directory."""
        if not source_dir.is_dir():
            raise HookSourceMissingError(
                f"{source_dir.name} directory not found",
                context={"source_dir": str(source_dir)},
            )
        return source_dir

    @staticmethod
    def existing_hooks(git_dir: Path) -> list[str]:
        """Names of supported hooks already present in git_dir/hooks."""
        hooks_dir = git_dir / "hooks"
        return [name for name in HookInstaller.SUPPORTED_HOOKS if (hooks_dir / name).is_file()]

    @staticmethod
    def install_hooks(
        source_dir: Path,
        git_dir: Path,
        confirm_overwrite: Callable[[list[str]], bool] | None = None,
    ) -> InstallReport:
        """
        Install Git hooks.

        If any target hook already exists, confirm_overwrite is called with
        their names. A False answer (or no callback at all) cancels the
        whole installation without touching any file.

        Args:
            source_dir: Directory holding the hook scripts
            git_dir: Path to .git directory
            confirm_overwrite: Asked once before replacing existing hooks

        Returns:
            InstallReport with one result per hook

        Raises:
            HookSourceMissingError: source_dir does not exist
            InstallError: a hook could not be copied
        """
        HookInstaller.require_source_dir(source_dir)

        report = InstallReport(existing=HookInstaller.existing_hooks(git_dir))

        if report.existing:
            if confirm_overwrite is None or not confirm_overwrite(report.existing):
                logger.info("hook_install_cancelled", existing=report.existing)
                report.cancelled = True
                return report

        hooks_dir = git_dir / "hooks"
        hooks_dir.mkdir(parents=True, exist_ok=True)

        for hook_name in HookInstaller.SUPPORTED_HOOKS:
            src = source_dir / hook_name
            already_existed = hook_name in report.existing

            if not src.is_file():
                logger.warning("hook_source_not_found", hook=hook_name, source_dir=str(source_dir))
                report.results.append(
                    HookInstallResult(
                        hook_name=hook_name,
                        installed=False,
                        message=f"Hook not found: {hook_name}",
                        already_existed=already_existed,
                    )
                )
                continue

            dest = hooks_dir / hook_name
            try:
                shutil.copy2(src, dest)
                dest.chmod(dest.stat().st_mode | _EXECUTABLE)
            except OSError as e:
                raise InstallError(
                    f"Failed to install {hook_name}: {e}",
                    context={"hook": hook_name, "dest": str(dest)},
                ) from e

            logger.info("hook_installed", hook=hook_name, dest=str(dest))
            report.results.append(
                HookInstallResult(
                    hook_name=hook_name,
                    installed=True,
                    message=f"Installed {hook_name}",
                    already_existed=already_existed,
                )
            )

        return report

    @staticmethod
    def uninstall_hooks(git_dir: Path) -> UninstallReport:
        """
        Remove every supported hook present in git_dir/hooks.

        Nothing installed is not an error; the report is simply empty.

        Raises:
            InstallError: a hook file exists but cannot be removed
        """
        report = UninstallReport()
        hooks_dir = git_dir / "hooks"

        for hook_name in HookInstaller.SUPPORTED_HOOKS:
            hook_path = hooks_dir / hook_name
            if not hook_path.is_file():
                continue
            try:
                hook_path.unlink()
            except OSError as e:
                raise InstallError(
                    f"Failed to remove {hook_name}: {e}",
                    context={"hook": hook_name, "path": str(hook_path)},
                ) from e
            logger.info("hook_removed", hook=hook_name)
            report.removed.append(hook_name)

        return report

    @staticmethod
    def list_hooks(git_dir: Path) -> dict[str, bool]:
        """
        List installed gitguard hooks.

        Returns:
            Dictionary of hook_name -> is_installed
        """
        existing = set(HookInstaller.existing_hooks(git_dir))
        return {name: name in existing for name in HookInstaller.SUPPORTED_HOOKS}
