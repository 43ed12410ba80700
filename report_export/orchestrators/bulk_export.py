"""Bulk export orchestrator.

Coordinates the complete list, export, poll and download workflow.
"""

import logging
import threading
from collections.abc import Iterable
from contextlib import nullcontext

from report_export.config import Settings
from report_export.domain.errors import PollCancelledError
from report_export.domain.models import ExportStatus, Project, ProjectResult, RunSummary
from report_export.domain.services import ProjectFilterService
from report_export.operations.client import ApiClient
from report_export.operations.download import download_export
from report_export.operations.export import JobPoller, start_export
from report_export.operations.projects import list_projects
from report_export.ui import Reporter

logger = logging.getLogger(__name__)


class BulkExport:
    """Orchestrates the export of every project, one at a time.

    For each project in listing order:
    1. Start an export job
    2. Poll until the job is complete
    3. Download the export.zip artifact

    Each project runs inside its own error boundary: a failure is recorded and
    the run moves on, unless ``fail_fast`` is set, in which case the remaining
    projects are skipped.
    """

    def __init__(
        self,
        config: Settings | None = None,
        client: ApiClient | None = None,
        poller: JobPoller | None = None,
        cancel_event: threading.Event | None = None,
    ):
        """Initialize the bulk export orchestrator.

        Args:
            config: Export configuration. If None, creates new Settings() from environment.
            client: API client to use. If None, one is created per run from config.
            poller: Job poller. If None, one is built from the poll settings in config.
            cancel_event: Event that stops polling and skips remaining projects when set.
        """
        self.config = config if config is not None else Settings()
        self.client = client
        self.cancel_event = cancel_event
        self.poller = (
            poller
            if poller is not None
            else JobPoller(
                interval=self.config.poll_interval,
                max_attempts=self.config.max_poll_attempts,
                timeout=self.config.poll_timeout,
                cancel_event=cancel_event,
            )
        )

    def run(
        self,
        reporter: Reporter | None = None,
        only: Iterable[str] | None = None,
    ) -> RunSummary:
        """Run the complete export workflow.

        Args:
            reporter: Optional reporter for progress. Defaults to Reporter().
            only: Short labels to export; None exports every listed project.

        Returns:
            Per-project results

        Raises:
            RequestError: The project list could not be fetched
        """
        if reporter is None:
            reporter = Reporter()

        summary = RunSummary()

        with self._client_context() as client:
            projects = ProjectFilterService.filter_projects(list_projects(client), only)
            reporter.report_projects_found(len(projects))

            for index, project in enumerate(projects):
                if self.cancel_event is not None and self.cancel_event.is_set():
                    self._abort(summary, projects[index:])
                    break

                try:
                    result = self._export_project(client, project, reporter)
                except PollCancelledError as e:
                    reporter.report_error(str(e))
                    summary.results.append(
                        ProjectResult(
                            project=project,
                            status=ExportStatus.FAILED,
                            job_id=e.job_id,
                            error=str(e),
                        )
                    )
                    self._abort(summary, projects[index + 1 :])
                    break

                summary.results.append(result)

                if result.status is ExportStatus.FAILED and self.config.fail_fast:
                    self._abort(summary, projects[index + 1 :])
                    break

        reporter.report_summary(summary)
        return summary

    def _export_project(
        self,
        client: ApiClient,
        project: Project,
        reporter: Reporter,
    ) -> ProjectResult:
        """Export, await and download a single project.

        Args:
            client: API client
            project: Project to export
            reporter: Progress reporter

        Returns:
            Result of this project's workflow
        """
        reporter.report_project_start(project)
        job_id = None

        try:
            job_id = start_export(client, project.short_label, self.config.export_format)
            reporter.report_job_started(job_id)

            files = self.poller.await_completion(
                client, project.short_label, job_id, reporter.report_job_progress
            )
            reporter.report_job_complete(job_id)

            path = download_export(
                client,
                files,
                project.label,
                self.config.output_dir,
                self.config.target_file,
            )
        except PollCancelledError:
            raise
        except Exception as e:
            logger.error(f"Export of project {project.label} failed: {e}")
            reporter.report_error(f"{project.label}: {e}")
            return ProjectResult(
                project=project, status=ExportStatus.FAILED, job_id=job_id, error=str(e)
            )

        if path is None:
            reporter.report_artifact_missing(project, self.config.target_file)
            return ProjectResult(project=project, status=ExportStatus.NO_ARTIFACT, job_id=job_id)

        reporter.report_file_saved(path)
        return ProjectResult(
            project=project, status=ExportStatus.EXPORTED, job_id=job_id, path=path
        )

    def _client_context(self):
        """Use the injected client as-is, or open and close one for this run."""
        if self.client is not None:
            return nullcontext(self.client)
        return ApiClient(
            self.config.base_url,
            self.config.api_token,
            auth_scheme=self.config.auth_scheme,
            timeout=self.config.api_timeout,
        )

    @staticmethod
    def _abort(summary: RunSummary, remaining: list[Project]) -> None:
        """Mark the run as aborted and record the remaining projects as skipped."""
        summary.aborted = True
        summary.results.extend(
            ProjectResult(project=project, status=ExportStatus.SKIPPED) for project in remaining
        )
