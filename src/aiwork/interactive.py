"""Interactive input for the command line."""

from typing import Callable, Optional, Protocol, Sequence

import click
import typer
from rich.console import Console


class Prompter(Protocol):
    """Source of answers for questions the CLI cannot resolve from flags or settings."""

    def secret(self, message: str) -> str:
        """Ask for a hidden, non-empty value such as an API key."""
        ...

    def text(self, message: str, validate: Callable[[str], bool], error: str) -> str:
        """Ask for a value until ``validate`` accepts it."""
        ...

    def choose(self, message: str, choices: Sequence[str], default: Optional[str] = None) -> str:
        """Ask the user to pick one of ``choices``."""
        ...

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...


class TyperPrompter:
    """Prompter backed by the terminal."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def secret(self, message: str) -> str:
        while True:
            value = typer.prompt(message, hide_input=True).strip()
            if value:
                return value
            self.console.print("[red]A value is required[/red]")

    def text(self, message: str, validate: Callable[[str], bool], error: str) -> str:
        while True:
            value = typer.prompt(message).strip()
            if validate(value):
                return value
            self.console.print(f"[red]{error}[/red]")

    def choose(self, message: str, choices: Sequence[str], default: Optional[str] = None) -> str:
        for choice in choices:
            marker = "[bold cyan]>[/bold cyan]" if choice == default else " "
            self.console.print(f" {marker} {choice}")
        if default not in choices:
            default = None
        return typer.prompt(
            message,
            type=click.Choice(list(choices)),
            default=default,
            show_choices=False,
        )

    def confirm(self, message: str, default: bool = False) -> bool:
        return typer.confirm(message, default=default)
