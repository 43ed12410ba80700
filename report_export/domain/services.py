"""Business logic services for the export workflow."""

from collections.abc import Iterable
from datetime import date, datetime, timezone

from report_export.domain.models import FileEntry, Project

EXPORT_FILE_NAME = "export.zip"


class ManifestService:
    """Service for selecting artifacts and naming output files."""

    @staticmethod
    def select_export_file(
        files: Iterable[FileEntry], name: str = EXPORT_FILE_NAME
    ) -> FileEntry | None:
        """Return the first manifest entry whose visible name matches exactly.

        Args:
            files: File manifest of a completed job
            name: Visible name to look for (case-sensitive)

        Returns:
            The first matching entry, or None if there is none
        """
        for entry in files:
            if entry.visible_name == name:
                return entry
        return None

    @staticmethod
    def build_output_filename(project_label: str, today: date | None = None) -> str:
        """Return ``<YYYY-MM-DD>_<label>_export.zip``.

        Args:
            project_label: Display label of the project
            today: Date to stamp; defaults to the current UTC date
        """
        if today is None:
            today = datetime.now(timezone.utc).date()
        return f"{today.isoformat()}_{project_label}_export.zip"


class ProjectFilterService:
    """Service for narrowing the project list before exporting."""

    @staticmethod
    def filter_projects(
        projects: list[Project], only: Iterable[str] | None = None
    ) -> list[Project]:
        """Keep projects whose short label is in ``only``, preserving listing order.

        Args:
            projects: Projects in listing order
            only: Short labels to keep; None or empty keeps everything
        """
        wanted = set(only or ())
        if not wanted:
            return list(projects)
        return [project for project in projects if project.short_label in wanted]
