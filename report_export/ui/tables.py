"""Table rendering utilities for CLI output."""

from rich.markup import escape
from rich.table import Table

from report_export.domain.models import ExportStatus, Project, RunSummary

STATUS_COLORS = {
    ExportStatus.EXPORTED: "green",
    ExportStatus.NO_ARTIFACT: "yellow",
    ExportStatus.FAILED: "red",
    ExportStatus.SKIPPED: "dim",
}


def create_summary_table(summary: RunSummary) -> Table:
    """Create a table with one row per processed project.

    Args:
        summary: Results of a bulk export run

    Returns:
        Rich Table object ready for display
    """
    table = Table(title=f"Export Summary ({len(summary.results)} projects)")
    table.add_column("Project", style="cyan")
    table.add_column("Short Label", style="dim")
    table.add_column("Job", style="dim")
    table.add_column("Status")
    table.add_column("Details", style="white")

    for result in summary.results:
        color = STATUS_COLORS[result.status]
        if result.path is not None:
            details = result.path.name
        else:
            details = escape(result.error or "-")
        table.add_row(
            result.project.label,
            result.project.short_label,
            result.job_id or "-",
            f"[{color}]{result.status.value}[/{color}]",
            details,
        )

    return table


def create_project_table(projects: list[Project]) -> Table:
    """Create a table listing projects in service order."""
    table = Table(title=f"Projects ({len(projects)} total)")
    table.add_column("Label", style="cyan")
    table.add_column("Short Label", style="white")

    for project in projects:
        table.add_row(project.label, project.short_label)

    return table


def format_status_summary(summary: RunSummary) -> str:
    """Return a one-line count of results per status, e.g. ``2 exported, 1 failed``."""
    parts = [
        f"{summary.count(status)} {status.value}"
        for status in ExportStatus
        if summary.count(status)
    ]
    return ", ".join(parts) if parts else "nothing exported"
