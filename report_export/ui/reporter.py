"""Reporter for export progress and results."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from report_export.domain.models import ExportJob, Project, RunSummary
from report_export.ui.tables import create_summary_table

SEPARATOR = "#####################"


class Reporter:
    """Export reporter with rich formatted output."""

    def __init__(self, silent: bool = False, console: Console | None = None) -> None:
        """Initialize reporter.

        Args:
            silent: If True, suppress all output (for testing/automation).
            console: Console to print to; defaults to a new stdout console.
        """
        self.silent = silent
        self.console = console if console is not None else Console(quiet=silent)

    def report_projects_found(self, count: int) -> None:
        """Report how many projects will be exported."""
        if not self.silent:
            self.console.print(f"Found {count} project(s) to export")

    def report_project_start(self, project: Project) -> None:
        """Print the separator and the project's display label."""
        if self.silent:
            return
        self.console.print(SEPARATOR, markup=False)
        self.console.print(f"Exporting report for project: [bold]{escape(project.label)}[/bold]")

    def report_job_started(self, job_id: str) -> None:
        """Report the job id returned by the export call."""
        if not self.silent:
            self.console.print(f"Polling job status for Job ID: {job_id}")

    def report_job_progress(self, job: ExportJob) -> None:
        """Report a pending job snapshot."""
        if not self.silent:
            self.console.print(
                f"  [dim]Job {job.job_id} progress: {job.progress}%. "
                f"Status: {escape(job.status)}. Waiting...[/dim]"
            )

    def report_job_complete(self, job_id: str) -> None:
        """Report that the job finished and the download starts."""
        if not self.silent:
            self.console.print(f"[green]Job {job_id} completed![/green] Downloading file...")

    def report_file_saved(self, path: Path) -> None:
        """Report where the archive was written."""
        if not self.silent:
            self.console.print(f"[green]✓[/green] File saved as {path.name}")

    def report_artifact_missing(self, project: Project, target_name: str) -> None:
        """Report that the completed job had no matching artifact."""
        self.report_warning(f'No file named "{target_name}" found for {project.label}')

    def report_warning(self, message: str) -> None:
        """Report a warning message."""
        if not self.silent:
            self.console.print(f"\n[yellow]Warning:[/yellow] {escape(message)}")

    def report_error(self, message: str) -> None:
        """Report an error message."""
        if not self.silent:
            self.console.print(f"\n[red]Error:[/red] {escape(message)}")

    def report_summary(self, summary: RunSummary) -> None:
        """Render the per-project results table."""
        if self.silent:
            return
        self.console.print()
        self.console.print(create_summary_table(summary))
        if summary.aborted:
            self.console.print("[red]Run aborted; remaining projects skipped[/red]")
