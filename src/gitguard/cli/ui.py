"""
Console output helpers shared by the hooks and the installer.

Status lines carry a colored marker (✓ ✗ ⚠ ℹ) followed by plain text.
Messages are escaped, so file names containing brackets print verbatim.
"""

import typer
from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)

RULE = "=" * 40


def success(message: str) -> None:
    console.print(f"[green]✓[/green] {escape(message)}")


def error(message: str) -> None:
    console.print(f"[red]✗[/red] {escape(message)}")


def warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {escape(message)}")


def info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def detail(message: str) -> None:
    """Indented continuation line under a status line."""
    console.print(f"  {escape(message)}")


def bullet(message: str, label: str | None = None) -> None:
    if label is None:
        console.print(f"  • {escape(message)}")
    else:
        console.print(f"  • [green]{escape(label)}[/green] {escape(message)}")


def header(title: str) -> None:
    console.print(f"[blue]{RULE}[/blue]")
    console.print(f"[blue]  {escape(title)}[/blue]")
    console.print(f"[blue]{RULE}[/blue]")


def section(title: str) -> None:
    console.print(f"[yellow]{escape(title)}[/yellow]")


def blank() -> None:
    console.print()


def ask_yes_no(prompt: str, default: bool = False) -> bool:
    """Ask a yes/no question; an empty answer or closed stdin picks the default."""
    try:
        return typer.confirm(prompt, default=default)
    except typer.Abort:
        # EOF on stdin, e.g. when run from a non-interactive shell
        console.print()
        return default
