"""Configure tests."""

import httpx
import pytest

from report_export.config import Settings
from report_export.operations.client import ApiClient

BASE_URL = "https://reports.test"
API_TOKEN = "secret-token"


class FakeReportService:
    """In-memory stand-in for the report REST service.

    Routes requests made through an ``httpx.MockTransport``:
    project listing, export creation, job status (served from a queue per
    job, the last snapshot repeating) and binary file content.
    """

    def __init__(self, projects: list[dict] | None = None):
        self.projects = projects or []
        self.job_ids: dict[str, str] = {}
        self.job_statuses: dict[str, list[dict]] = {}
        self.export_errors: dict[str, int] = {}
        self.status_errors: dict[str, int] = {}
        self.files: dict[str, bytes] = {}
        self.requests: list[httpx.Request] = []

    def add_project(
        self,
        label: str,
        short_label: str,
        job_id: str,
        statuses: list[dict] | None = None,
    ) -> None:
        """Register a project whose export job walks through ``statuses``."""
        self.projects.append({"label": label, "shortLabel": short_label})
        self.job_ids[short_label] = job_id
        if statuses is not None:
            self.job_statuses[job_id] = list(statuses)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = [p for p in request.url.path.split("/") if p]

        if request.method == "GET" and parts == ["rest", "1"]:
            return httpx.Response(200, json={"project": self.projects})

        if request.method == "POST" and parts[:2] == ["rest", "1"] and parts[3:] == [
            "report",
            "export_zip",
        ]:
            short_label = parts[2]
            if short_label in self.export_errors:
                return httpx.Response(self.export_errors[short_label])
            return httpx.Response(200, json={"jobId": self.job_ids[short_label]})

        if request.method == "GET" and len(parts) == 5 and parts[3] == "job":
            job_id = parts[4]
            if job_id in self.status_errors:
                return httpx.Response(self.status_errors[job_id])
            queue = self.job_statuses[job_id]
            snapshot = queue.pop(0) if len(queue) > 1 else queue[0]
            return httpx.Response(200, json=snapshot)

        if request.method == "GET" and request.url.path in self.files:
            return httpx.Response(200, content=self.files[request.url.path])

        return httpx.Response(404)

    def paths(self, method: str | None = None) -> list[str]:
        """Return request paths in the order they were made."""
        return [r.url.path for r in self.requests if method is None or r.method == method]


def done(*files: tuple[str, str]) -> dict:
    """Build a completed job snapshot with the given (visibleName, restUrl) files."""
    return {
        "progress": 100,
        "status": "Done",
        "jobFile": [{"visibleName": name, "restUrl": url} for name, url in files],
    }


def pending(progress: int = 50, status: str = "Running") -> dict:
    """Build a pending job snapshot."""
    return {"progress": progress, "status": status}


@pytest.fixture
def service():
    """Create an empty fake report service."""
    return FakeReportService()


@pytest.fixture
def client(service):
    """Create an API client wired to the fake service."""
    with ApiClient(BASE_URL, API_TOKEN, transport=service.transport()) as api_client:
        yield api_client


@pytest.fixture
def settings(tmp_path):
    """Create settings writing into a temporary directory."""
    return Settings(
        api_token=API_TOKEN,
        base_url=BASE_URL,
        output_dir=tmp_path / "exports",
        poll_interval=5.0,
    )


@pytest.fixture
def sleeps():
    """Collect the durations a poller sleeps for instead of sleeping."""
    return []
