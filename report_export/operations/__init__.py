"""Remote service operations.

Public API:
    - ApiClient: Authenticated HTTP client
    - list_projects: Fetch the project list
    - start_export: Start an export job for a project
    - fetch_job: Read one job status snapshot
    - JobPoller / await_completion: Wait for a job to complete
    - download_export: Save the export.zip artifact of a completed job
"""

from report_export.operations.client import ApiClient
from report_export.operations.download import download_export
from report_export.operations.export import JobPoller, await_completion, fetch_job, start_export
from report_export.operations.projects import list_projects

__all__ = [
    "ApiClient",
    "list_projects",
    "start_export",
    "fetch_job",
    "JobPoller",
    "await_completion",
    "download_export",
]
