"""Command-line interface for aiwork."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from aiwork.errors import AIWorkError, UnsupportedProviderError
from aiwork.interactive import Prompter, TyperPrompter
from aiwork.llm.registry import DEFAULT_PROVIDER, PROVIDERS, ProviderId
from aiwork.logging_config import configure_logging
from aiwork.models import Settings
from aiwork.models.config import DEFAULT_ENV_FILE
from aiwork.notify.slack import send_to_slack, validate_webhook_url
from aiwork.settings_file import write_settings
from aiwork.workflow import (
    generate_work_report,
    resolve_api_key,
    resolve_model,
    resolve_provider,
    resolve_webhook_url,
)

app = typer.Typer(
    name="ai-work",
    help="Generate AI-powered work reports from git commits",
    add_completion=False,
)
console = Console()


def make_prompter() -> Prompter:
    """Build the prompter used for interactive questions."""
    return TyperPrompter(console)


def _supported_providers() -> str:
    return ", ".join(p.value for p in ProviderId)


@app.command()
def generate(
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help=f"LLM provider ({_supported_providers()})"),
    api_key: Optional[str] = typer.Option(None, "--api-key", "-k", help="API key for the selected provider"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model to use for the selected provider"),
    days: int = typer.Option(1, "--days", "-d", min=1, help="Number of days to look back"),
    repo: Path = typer.Option(Path("."), "--repo", "-r", help="Repository path"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Filter by author email"),
    slack: bool = typer.Option(False, "--slack", "-s", help="Send report to Slack after generation"),
    webhook: Optional[str] = typer.Option(None, "--webhook", "-w", help="Slack webhook URL"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Send to Slack without asking for confirmation"),
    env_file: Path = typer.Option(Path(DEFAULT_ENV_FILE), "--env-file", help="Settings file to read"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate a work report from recent git commits."""
    prompter = make_prompter()

    try:
        settings = Settings(_env_file=env_file)
        configure_logging("DEBUG" if verbose else settings.log_level)

        descriptor = resolve_provider(provider, settings)
        key = resolve_api_key(api_key, descriptor, settings, prompter)
        resolved_model = resolve_model(model, descriptor, settings, prompter)

        if verbose:
            console.print(f"[bold blue]Provider:[/bold blue] {descriptor.name}")
            console.print(f"[bold blue]Model:[/bold blue] {resolved_model}")
            console.print(f"[bold blue]Repository:[/bold blue] {repo}")

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Analyzing git logs...", total=None)
            report = asyncio.run(
                generate_work_report(
                    provider=descriptor.id.value,
                    api_key=key,
                    model=resolved_model,
                    repo_path=repo,
                    days=days,
                    author_email=author,
                )
            )

        console.print("[bold green]✓[/bold green] Report generated successfully!")

    except UnsupportedProviderError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        console.print(f"[yellow]Supported providers: {_supported_providers()}[/yellow]")
        raise typer.Exit(1)
    except typer.Abort:
        raise
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose and not isinstance(e, AIWorkError):
            import traceback
            console.print(f"[dim]{traceback.format_exc()}[/dim]")
        raise typer.Exit(1)

    console.print("\n[bold cyan]📊 Work Report[/bold cyan]")
    console.print("[dim]" + "─" * 50 + "[/dim]")
    console.print(report, markup=False, highlight=False, emoji=False)

    if slack:
        _deliver_to_slack(
            report,
            webhook=webhook,
            settings=settings,
            prompter=prompter,
            author=author,
            repo=repo,
            confirm=not yes,
        )


def _deliver_to_slack(
    report: str,
    webhook: Optional[str],
    settings: Settings,
    prompter: Prompter,
    author: Optional[str],
    repo: Path,
    confirm: bool,
) -> None:
    """Send a generated report to Slack, reporting but not raising failures."""
    try:
        webhook_url = resolve_webhook_url(webhook, settings, prompter)
        if confirm and not prompter.confirm("Send this report to Slack?", default=True):
            console.print("[yellow]Skipped sending to Slack[/yellow]")
            return

        repo_name = repo.resolve().name if str(repo) != "." else None
        with console.status("Sending to Slack..."):
            send_to_slack(report, webhook_url, author=author, repo_name=repo_name)
        console.print("[bold green]✓[/bold green] Report sent to Slack successfully!")

    except typer.Abort:
        raise
    except Exception as e:
        console.print(f"[bold red]✗[/bold red] Failed to send to Slack: {escape(str(e))}")


@app.command()
def config(
    env_file: Path = typer.Option(Path(DEFAULT_ENV_FILE), "--env-file", help="Settings file to write"),
) -> None:
    """Configure default settings."""
    prompter = make_prompter()

    provider_id = ProviderId(
        prompter.choose(
            "Select LLM provider",
            [p.value for p in ProviderId],
            default=DEFAULT_PROVIDER.value,
        )
    )
    descriptor = PROVIDERS[provider_id]

    api_key = prompter.secret(f"Enter your {descriptor.name} API key")
    model = prompter.choose(
        f"Select default {descriptor.name} model",
        list(descriptor.models),
        default=descriptor.default_model,
    )

    webhook_url = None
    if prompter.confirm("Do you want to configure Slack integration?", default=False):
        webhook_url = prompter.text(
            "Enter your Slack webhook URL",
            validate=validate_webhook_url,
            error="Invalid Slack webhook URL format",
        )

    try:
        written = write_settings(env_file, provider_id, api_key, model, webhook_url)
    except OSError as e:
        console.print(f"[bold red]Error saving configuration:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[bold green]✓[/bold green] Configuration saved to {written}")


@app.command()
def providers() -> None:
    """List supported providers and their models."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Provider", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("API key variable", style="yellow")
    table.add_column("Default model", style="blue")
    table.add_column("Models", style="white")

    for provider_id, descriptor in PROVIDERS.items():
        table.add_row(
            provider_id.value,
            descriptor.name,
            descriptor.env_key,
            descriptor.default_model,
            "\n".join(descriptor.models),
        )

    console.print(table)


if __name__ == "__main__":
    app()
