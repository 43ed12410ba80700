"""Report Export SDK.

A Python library for exporting project report archives in bulk.

Quick Start (High-Level API):
    >>> from report_export import export_reports, Settings
    >>> config = Settings(api_token="...", base_url="https://reports.example.com")
    >>> summary = export_reports(config)  # Exports every project

Quick Start (SDK API):
    >>> from report_export import BulkExport, Settings
    >>> orchestrator = BulkExport(Settings(api_token="...", base_url="https://..."))
    >>> summary = orchestrator.run(only=["demo"])

Configuration:
    >>> import os
    >>> os.environ["REPORT_EXPORT_API_TOKEN"] = "..."
    >>> os.environ["REPORT_EXPORT_BASE_URL"] = "https://reports.example.com"
    >>> os.environ["REPORT_EXPORT_POLL_TIMEOUT"] = "600"
    >>> config = Settings()  # Loads from environment

Public API:
    High-level functions:
        - export_reports: Run the complete bulk export

    Orchestrators:
        - BulkExport: List, export, poll and download every project

    Operations:
        - ApiClient: Authenticated HTTP client
        - JobPoller: Configurable job completion poller

    Configuration:
        - Settings: Configuration model

    Domain Models:
        - Project, FileEntry, ExportJob, JobState
        - ExportStatus, ProjectResult, RunSummary

    Errors:
        - RequestError, PollTimeoutError, PollCancelledError

    Reporters (for custom UIs):
        - Reporter: Progress reporter (use silent=True for headless mode)
"""

from collections.abc import Iterable

# Configuration
from report_export.config import Settings

# Domain models and errors
from report_export.domain import (
    ExportJob,
    ExportStatus,
    FileEntry,
    JobState,
    PollCancelledError,
    PollError,
    PollTimeoutError,
    Project,
    ProjectResult,
    ReportExportError,
    RequestError,
    RunSummary,
)

# Operations
from report_export.operations import ApiClient, JobPoller

# Orchestrators
from report_export.orchestrators import BulkExport

# UI Reporters
from report_export.ui import Reporter

__all__ = [
    # High-level functions
    "export_reports",
    # Orchestrators
    "BulkExport",
    # Operations
    "ApiClient",
    "JobPoller",
    # Configuration
    "Settings",
    # Domain models
    "Project",
    "FileEntry",
    "ExportJob",
    "JobState",
    "ExportStatus",
    "ProjectResult",
    "RunSummary",
    # Errors
    "ReportExportError",
    "RequestError",
    "PollError",
    "PollTimeoutError",
    "PollCancelledError",
    # Reporters
    "Reporter",
]

# Version
__version__ = "0.1.0"


def export_reports(
    config: Settings | None = None,
    reporter: Reporter | None = None,
    only: Iterable[str] | None = None,
) -> RunSummary:
    """Run the complete bulk export (high-level convenience function).

    Lists the projects, then exports, awaits and downloads each one in turn.

    Args:
        config: Export configuration. If None, loads Settings() from environment.
        reporter: Progress reporter. If None, uses Reporter().
        only: Short labels to export; None exports every project.

    Returns:
        Per-project results of the run

    Example:
        >>> from report_export import export_reports, Settings
        >>> config = Settings(api_token="...", base_url="https://...", fail_fast=True)
        >>> summary = export_reports(config=config)
        >>> summary.ok
        True
    """
    orchestrator = BulkExport(config)
    return orchestrator.run(reporter=reporter, only=only)
