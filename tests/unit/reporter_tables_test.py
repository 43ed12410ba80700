"""Unit tests for the reporter and table rendering utilities."""

from pathlib import Path

from rich.console import Console

from report_export.domain.models import (
    ExportJob,
    ExportStatus,
    Project,
    ProjectResult,
    RunSummary,
)
from report_export.ui import Reporter
from report_export.ui.reporter import SEPARATOR
from report_export.ui.tables import (
    create_project_table,
    create_summary_table,
    format_status_summary,
)

DEMO = Project(label="Demo", short_label="demo")


def recording_reporter() -> Reporter:
    return Reporter(console=Console(record=True, width=120))


def sample_summary() -> RunSummary:
    return RunSummary(
        results=[
            ProjectResult(
                project=DEMO,
                status=ExportStatus.EXPORTED,
                job_id="42",
                path=Path("/out/2024-01-01_Demo_export.zip"),
            ),
            ProjectResult(
                project=Project(label="Broken", short_label="broken"),
                status=ExportStatus.FAILED,
                job_id=None,
                error="POST /rest/1/broken/report/export_zip?format=xml returned HTTP 500",
            ),
        ]
    )


class TestReporter:
    def test_project_start_prints_separator_and_label(self):
        reporter = recording_reporter()

        reporter.report_project_start(DEMO)

        output = reporter.console.export_text()
        assert SEPARATOR in output
        assert "Exporting report for project: Demo" in output

    def test_job_progress_line(self):
        reporter = recording_reporter()

        reporter.report_job_started("42")
        reporter.report_job_progress(ExportJob(job_id="42", progress=50, status="Running"))

        output = reporter.console.export_text()
        assert "Polling job status for Job ID: 42" in output
        assert "Job 42 progress: 50%. Status: Running. Waiting..." in output

    def test_silent_reporter_prints_nothing(self):
        console = Console(record=True)
        reporter = Reporter(silent=True, console=console)

        reporter.report_project_start(DEMO)
        reporter.report_error("boom")
        reporter.report_summary(sample_summary())

        assert console.export_text() == ""

    def test_summary_marks_aborted_run(self):
        reporter = recording_reporter()
        summary = sample_summary()
        summary.aborted = True

        reporter.report_summary(summary)

        output = reporter.console.export_text()
        assert "Run aborted; remaining projects skipped" in output
        assert "first failure" not in output

    def test_job_status_is_not_markup(self):
        reporter = recording_reporter()

        reporter.report_job_progress(ExportJob(job_id="42", progress=10, status="[bold]Queued"))

        assert "Status: [bold]Queued. Waiting..." in reporter.console.export_text()


class TestTables:
    def test_summary_table_columns_and_rows(self):
        table = create_summary_table(sample_summary())

        headers = [col.header for col in table.columns]
        assert headers == ["Project", "Short Label", "Job", "Status", "Details"]
        assert table.row_count == 2
        assert "2 projects" in table.title

    def test_summary_table_details(self):
        console = Console(record=True, width=200)
        console.print(create_summary_table(sample_summary()))
        output = console.export_text()

        assert "2024-01-01_Demo_export.zip" in output
        assert "HTTP 500" in output

    def test_project_table(self):
        table = create_project_table([DEMO, Project(label="Other", short_label="oth")])

        assert table.row_count == 2
        assert "2 total" in table.title

    def test_format_status_summary(self):
        assert format_status_summary(sample_summary()) == "1 exported, 1 failed"
        assert format_status_summary(RunSummary()) == "nothing exported"
