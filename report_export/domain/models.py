"""Domain models for the export workflow."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

COMPLETE_PROGRESS = 100
COMPLETE_STATUS = "Done"


class JobState(str, Enum):
    """Lifecycle of a remote export job as seen by the poller."""

    PENDING = "pending"
    COMPLETE = "complete"


class ExportStatus(str, Enum):
    """Outcome of one project's export workflow."""

    EXPORTED = "exported"  # Archive downloaded and written
    NO_ARTIFACT = "no_artifact"  # Job finished without an export.zip entry
    FAILED = "failed"  # Request, poll or write failure
    SKIPPED = "skipped"  # Not attempted because an earlier project aborted the run


class Project(BaseModel):
    """A project returned by the listing endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    label: str  # Display name, also used in the output filename
    short_label: str = Field(alias="shortLabel")  # Identifier used in REST paths


class FileEntry(BaseModel):
    """One downloadable artifact attached to a completed job."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    visible_name: str = Field(default="", alias="visibleName")
    rest_url: str | None = Field(default=None, alias="restUrl")  # Checked only when downloaded

    @field_validator("visible_name", mode="before")
    @classmethod
    def parse_null_name(cls, v):
        """Convert a null name to an empty string."""
        return "" if v is None else v


class ExportJob(BaseModel):
    """Snapshot of a remote export job.

    Never mutated locally; a newer snapshot is fetched instead.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    job_id: str = Field(alias="jobId")
    progress: int = 0
    status: str = ""
    files: list[FileEntry] = Field(default_factory=list, alias="jobFile")

    @field_validator("progress", "status", "files", mode="before")
    @classmethod
    def parse_null_fields(cls, v, info: ValidationInfo):
        """Convert null fields of a pending snapshot to their defaults."""
        if v is None:
            return {"progress": 0, "status": "", "files": []}[info.field_name]
        return v

    @property
    def state(self) -> JobState:
        """Return COMPLETE only for progress 100 together with status 'Done'."""
        if self.progress == COMPLETE_PROGRESS and self.status == COMPLETE_STATUS:
            return JobState.COMPLETE
        return JobState.PENDING

    @property
    def is_complete(self) -> bool:
        return self.state is JobState.COMPLETE


class ProjectResult(BaseModel):
    """Result of exporting a single project."""

    project: Project
    status: ExportStatus
    job_id: str | None = None
    path: Path | None = None
    error: str | None = None


class RunSummary(BaseModel):
    """Aggregated results of a bulk export run."""

    results: list[ProjectResult] = Field(default_factory=list)
    aborted: bool = False

    def count(self, status: ExportStatus) -> int:
        """Return the number of projects that ended with the given status."""
        return sum(1 for result in self.results if result.status is status)

    @property
    def exported(self) -> list[ProjectResult]:
        return [r for r in self.results if r.status is ExportStatus.EXPORTED]

    @property
    def failed(self) -> list[ProjectResult]:
        return [r for r in self.results if r.status is ExportStatus.FAILED]

    @property
    def ok(self) -> bool:
        """Return True if no project failed and the run was not aborted."""
        return not self.failed and not self.aborted

    def __repr__(self) -> str:
        """Return string representation of the summary."""
        return (
            f"RunSummary("
            f"exported={self.count(ExportStatus.EXPORTED)}, "
            f"no_artifact={self.count(ExportStatus.NO_ARTIFACT)}, "
            f"failed={self.count(ExportStatus.FAILED)}, "
            f"skipped={self.count(ExportStatus.SKIPPED)}, "
            f"aborted={self.aborted})"
        )
