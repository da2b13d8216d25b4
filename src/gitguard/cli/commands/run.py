"""
CLI commands that execute a hook directly.

Useful for trying a hook without committing or pushing:
    gitguard run commit-msg .git/COMMIT_EDITMSG
    gitguard run pre-push
    gitguard run pre-commit
"""

from pathlib import Path
from typing import List, Optional

import typer

from gitguard.hooks import commit_msg, pre_commit, pre_push

app = typer.Typer(
    name="run",
    help="Run a hook against the current repository",
    no_args_is_help=True,
)


@app.command(name="commit-msg")
def commit_msg_cmd(
    message_file: Path = typer.Argument(..., help="File holding the proposed commit message"),
):
    """Validate a commit message file."""
    raise typer.Exit(commit_msg.run(message_file))


@app.command(name="pre-push")
def pre_push_cmd(
    remote: Optional[str] = typer.Argument(None, help="Remote name (passed by git, ignored)"),
    url: Optional[str] = typer.Argument(None, help="Remote URL (passed by git, ignored)"),
    branch: Optional[str] = typer.Option(None, "--branch", "-b", help="Check this name instead of the current branch"),
):
    """Validate the current branch name."""
    raise typer.Exit(pre_push.run(branch=branch))


@app.command(name="pre-commit")
def pre_commit_cmd(
    files: Optional[List[str]] = typer.Argument(None, help="Files to check (default: staged files)"),
):
    """Check staged files for large files, secrets and debug statements."""
    if files:
        raise typer.Exit(pre_commit.run(staged=files, root=Path.cwd()))
    raise typer.Exit(pre_commit.run())
