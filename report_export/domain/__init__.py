"""Domain models and business logic."""

from report_export.domain.errors import (
    PollCancelledError,
    PollError,
    PollTimeoutError,
    ReportExportError,
    RequestError,
)
from report_export.domain.models import (
    ExportJob,
    ExportStatus,
    FileEntry,
    JobState,
    Project,
    ProjectResult,
    RunSummary,
)
from report_export.domain.types import PollProgressHook

__all__ = [
    "Project",
    "FileEntry",
    "ExportJob",
    "JobState",
    "ExportStatus",
    "ProjectResult",
    "RunSummary",
    "ReportExportError",
    "RequestError",
    "PollError",
    "PollTimeoutError",
    "PollCancelledError",
    "PollProgressHook",
]
