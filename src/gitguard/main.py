"""
gitguard CLI - git hooks for branch naming, commit messages and staged content
Main entry point for the command-line interface

Usage:
    gitguard hooks install        # Install the hooks into .git/hooks
    gitguard hooks uninstall      # Remove them again
    gitguard hooks list           # Show which hooks are installed
    gitguard run pre-commit       # Run a hook by hand
    install-hooks                 # Standalone installer
    uninstall-hooks               # Standalone uninstaller
"""

import typer
from rich.console import Console
from rich.panel import Panel

from gitguard import __version__
from gitguard.cli.commands import hooks, run
from gitguard.shared.infrastructure.logging import configure_logging

app = typer.Typer(
    name="gitguard",
    help="gitguard - git hooks for branch naming, commit message quality and content checks",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()

# Register commands
app.add_typer(hooks.app, name="hooks", help="Install, remove and list the git hooks")
app.add_typer(run.app, name="run", help="Run a hook against the current repository")


@app.callback()
def _setup():
    configure_logging()


@app.command()
def version():
    """Show gitguard version information"""
    console.print(Panel.fit(
        "[bold cyan]gitguard[/bold cyan]\n"
        f"[dim]Version:[/dim] {__version__}\n",
        title="About gitguard",
        border_style="cyan"
    ))


def main():
    """Main entry point"""
    app()


def install_hooks_main():
    """Entry point for the install-hooks console script."""
    configure_logging()
    typer.run(hooks.install_hooks_cmd)


def uninstall_hooks_main():
    """Entry point for the uninstall-hooks console script."""
    configure_logging()
    typer.run(hooks.uninstall_hooks_cmd)


if __name__ == "__main__":
    main()
