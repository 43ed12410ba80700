"""Typer-based CLI for bulk report export."""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from report_export.config import Settings
from report_export.domain.errors import RequestError
from report_export.operations.client import ApiClient
from report_export.operations.projects import list_projects
from report_export.orchestrators import BulkExport
from report_export.ui import Reporter
from report_export.ui.tables import create_project_table, format_status_summary

app = typer.Typer(help="Bulk export of project reports")

API_TOKEN_OPTION = typer.Option(
    ..., "--api-token", "--api_token", "--token", envvar="REPORT_EXPORT_API_TOKEN", help="API token"
)
BASE_URL_OPTION = typer.Option(
    ...,
    "--base-url",
    "--base_url",
    "--url",
    envvar="REPORT_EXPORT_BASE_URL",
    help="Base URL of the service",
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Show help when no subcommand is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_settings(reporter: Reporter, **overrides) -> Settings:
    """Build settings from CLI values, falling back to environment for unset ones."""
    try:
        return Settings(**{key: value for key, value in overrides.items() if value is not None})
    except ValidationError as e:
        reporter.report_error(f"Invalid configuration:\n{e}")
        raise typer.Exit(2) from e


@app.command()
def run(
    api_token: str = API_TOKEN_OPTION,
    base_url: str = BASE_URL_OPTION,
    output_dir: Path = typer.Option(
        None, "--output-dir", "-o", help="Directory for downloaded archives (default: cwd)"
    ),
    poll_interval: float = typer.Option(
        None, "--poll-interval", help="Seconds between job status checks (default: 5)"
    ),
    max_attempts: int = typer.Option(
        None, "--max-attempts", help="Give up on a job after this many status checks"
    ),
    timeout: float = typer.Option(None, "--timeout", help="Give up on a job after this many seconds"),
    fail_fast: bool = typer.Option(
        False, "--fail-fast", help="Stop the whole run at the first failing project"
    ),
    only: list[str] = typer.Option(
        None, "--only", help="Export only this short label (repeatable)"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress progress output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Export, await and download the report archive of every project."""
    _configure_logging(verbose)
    reporter = Reporter(silent=quiet)
    config = _load_settings(
        reporter,
        api_token=api_token,
        base_url=base_url,
        output_dir=output_dir,
        poll_interval=poll_interval,
        max_poll_attempts=max_attempts,
        poll_timeout=timeout,
        fail_fast=fail_fast or None,
    )

    orchestrator = BulkExport(config)
    try:
        summary = orchestrator.run(reporter=reporter, only=only)
    except RequestError as e:
        reporter.report_error(f"An error occurred: {e}")
        raise typer.Exit(1) from e

    reporter.console.print(f"\n[bold]Summary:[/bold] {format_status_summary(summary)}")
    if not summary.ok:
        raise typer.Exit(1)


@app.command()
def projects(
    api_token: str = API_TOKEN_OPTION,
    base_url: str = BASE_URL_OPTION,
):
    """List the projects that would be exported."""
    _configure_logging(False)
    reporter = Reporter()
    config = _load_settings(reporter, api_token=api_token, base_url=base_url)

    try:
        with ApiClient(
            config.base_url,
            config.api_token,
            auth_scheme=config.auth_scheme,
            timeout=config.api_timeout,
        ) as client:
            found = list_projects(client)
    except RequestError as e:
        reporter.report_error(str(e))
        raise typer.Exit(1) from e

    if not found:
        reporter.console.print("[dim]No projects found[/dim]")
        return

    reporter.console.print(create_project_table(found))


if __name__ == "__main__":
    app()
