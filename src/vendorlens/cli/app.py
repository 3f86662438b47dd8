"""Main CLI application using Typer."""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from vendorlens.version import __version__
from vendorlens.core.config import get_settings
from vendorlens.core.exceptions import ConfigurationError, ValidationError
from vendorlens.core.logging import setup_logging

app = typer.Typer(
    name="vendorlens",
    help="VendorLens - AI-assisted third-party vendor risk analysis",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"VendorLens version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """VendorLens - know who you are doing business with."""
    setup_logging()


@app.command()
def analyze(
    domain: Annotated[str, typer.Argument(help="Vendor domain, e.g. example.com")],
    provider: Annotated[
        Optional[str],
        typer.Option(
            "--provider",
            "-p",
            help="AI provider: gemini, anthropic, openai, ollama",
        ),
    ] = None,
    concurrency: Annotated[
        Optional[int],
        typer.Option(
            "--concurrency",
            "-c",
            min=1,
            max=8,
            help="Checklist steps to run at once after the domain check",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file path (JSON or HTML)"),
    ] = None,
    format_type: Annotated[
        str,
        typer.Option("--format", help="Output format: json, table"),
    ] = "table",
) -> None:
    """
    Analyze a vendor domain and print its risk profile.

    Examples:
        vendorlens analyze example.com
        vendorlens analyze example.com --provider ollama
        vendorlens analyze example.com --output report.html
    """
    from vendorlens.ai import create_oracle
    from vendorlens.pipeline import RiskAnalyzer

    settings = get_settings()

    try:
        oracle = create_oracle(provider, settings)
    except ConfigurationError as e:
        console.print(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1) from None

    console.print(
        Panel(
            f"[bold blue]Vendor Risk Analysis[/bold blue]\n"
            f"Domain: [green]{escape(domain)}[/green]\n"
            f"Provider: [cyan]{oracle.name}[/cyan]",
            title="Starting Analysis",
        )
    )

    with console.status("[bold green]Analyzing...[/bold green]") as status:

        def show_progress(result) -> None:
            status.update(f"[bold green]Analyzing...[/bold green] {result.question}")

        analyzer = RiskAnalyzer(
            oracle,
            max_concurrent_steps=concurrency or settings.max_concurrent_steps,
            progress_callback=show_progress,
        )
        try:
            profile = asyncio.run(analyzer.analyze(domain))
        except (ValidationError, ConfigurationError) as e:
            console.print(f"[red]Cannot analyze: {escape(e.message)}[/red]")
            raise typer.Exit(1) from None

    if output:
        if str(output).endswith(".html"):
            from vendorlens.reports import HTMLReportGenerator

            HTMLReportGenerator().generate(profile, output)
            console.print(f"[green]HTML report saved to {output}[/green]")
        else:
            from vendorlens.cli.formatters import export_json

            export_json(profile, output)
            console.print(f"[green]Results saved to {output}[/green]")
        return

    _display_results(profile, format_type)


def _display_results(profile, format_type: str) -> None:
    """Display analysis results."""
    from vendorlens.cli.formatters import format_json, format_profile

    if format_type == "json":
        format_json(console, profile)
    else:
        format_profile(console, profile)


@app.command()
def checklist() -> None:
    """List the checklist questions asked for every vendor."""
    from vendorlens.models import CHECKLIST_CONFIG

    table = Table(title="Risk Checklist")
    table.add_column("#", style="dim")
    table.add_column("Question", style="cyan")
    table.add_column("Description")

    for index, definition in enumerate(CHECKLIST_CONFIG.values(), start=1):
        table.add_row(str(index), definition.question, definition.description or "")

    console.print(table)


@app.command()
def config(
    show: Annotated[
        bool,
        typer.Option("--show", "-s", help="Show current configuration"),
    ] = False,
    validate: Annotated[
        bool,
        typer.Option("--validate", help="Validate configuration"),
    ] = False,
) -> None:
    """Manage configuration settings."""
    settings = get_settings()

    if show or not validate:
        table = Table(title="Configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Default AI Provider", settings.default_ai_provider)
        table.add_row("Gemini Model", settings.gemini_model)
        table.add_row("Anthropic Model", settings.anthropic_model)
        table.add_row("OpenAI Model", settings.openai_model)
        table.add_row("Ollama Host", settings.ollama_host)
        table.add_row("Ollama Model", settings.ollama_model)
        table.add_row(
            "Gemini API Key",
            "[green]Set[/green]" if settings.gemini_api_key else "[red]Not set[/red]",
        )
        table.add_row(
            "Anthropic API Key",
            "[green]Set[/green]" if settings.anthropic_api_key else "[red]Not set[/red]",
        )
        table.add_row(
            "OpenAI API Key",
            "[green]Set[/green]" if settings.openai_api_key else "[red]Not set[/red]",
        )
        table.add_row("Max Concurrent Steps", str(settings.max_concurrent_steps))
        table.add_row(
            "Oracle Requests/Minute",
            str(settings.oracle_requests_per_minute or "unlimited"),
        )
        table.add_row("API Host", settings.api_host)
        table.add_row("API Port", str(settings.api_port))
        table.add_row("Log Level", settings.log_level)
        table.add_row("Log Format", settings.log_format)

        console.print(table)

    if validate:
        errors = []

        if settings.default_ai_provider == "gemini" and not settings.gemini_api_key:
            errors.append("GEMINI_API_KEY is required for Gemini provider")
        if settings.default_ai_provider == "anthropic" and not settings.anthropic_api_key:
            errors.append("ANTHROPIC_API_KEY is required for Anthropic provider")
        if settings.default_ai_provider == "openai" and not settings.openai_api_key:
            errors.append("OPENAI_API_KEY is required for OpenAI provider")

        if errors:
            console.print("[red]Configuration errors:[/red]")
            for error in errors:
                console.print(f"  - {error}")
            raise typer.Exit(1)
        else:
            console.print("[green]Configuration is valid[/green]")


@app.command()
def serve(
    host: Annotated[
        Optional[str],
        typer.Option("--host", "-h", help="Host to bind to"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Port to bind to"),
    ] = None,
    reload: Annotated[
        bool,
        typer.Option("--reload", "-r", help="Enable auto-reload for development"),
    ] = False,
) -> None:
    """Start the REST API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(
        Panel(
            f"[bold blue]Starting API Server[/bold blue]\n"
            f"Host: [green]{host}[/green]\n"
            f"Port: [green]{port}[/green]\n"
            f"Docs: [cyan]http://{host}:{port}/docs[/cyan]",
            title="API Server",
        )
    )

    uvicorn.run(
        "vendorlens.api.app:app",
        host=host,
        port=port,
        reload=reload,
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
