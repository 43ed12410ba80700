"""Export job creation and status polling."""

import logging
import threading
import time

from report_export.domain.errors import PollCancelledError, PollTimeoutError, RequestError
from report_export.domain.models import ExportJob, FileEntry
from report_export.domain.types import ClockFunc, PollProgressHook, SleepFunc
from report_export.operations.client import ApiClient

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 5.0


def start_export(client: ApiClient, short_label: str, export_format: str = "xml") -> str:
    """Start an asynchronous zip export for a project and return its job id."""
    path = f"/rest/1/{short_label}/report/export_zip?format={export_format}"
    try:
        payload = client.post(path)
    except RequestError as e:
        logger.error(f"Failed to export project report for {short_label}: {e}")
        raise

    return str(payload["jobId"])


def fetch_job(client: ApiClient, short_label: str, job_id: str) -> ExportJob:
    """Fetch the current snapshot of an export job."""
    payload = client.get(f"/rest/1/{short_label}/job/{job_id}")
    return ExportJob.model_validate({**payload, "jobId": job_id})


class JobPoller:
    """Polls an export job until the service reports it complete.

    With the defaults there is no attempt cap, no deadline and no cancellation,
    so :meth:`await_completion` blocks until the job is done or a request
    fails. Callers that need a bound pass ``max_attempts``, ``timeout`` or a
    ``cancel_event``; setting the event wakes a pending wait immediately.
    """

    def __init__(
        self,
        interval: float = DEFAULT_POLL_INTERVAL,
        max_attempts: int | None = None,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
        sleep: SleepFunc = time.sleep,
        clock: ClockFunc = time.monotonic,
    ):
        """Initialize the poller.

        Args:
            interval: Seconds to wait between status checks
            max_attempts: Maximum number of status checks (None = unlimited)
            timeout: Seconds after which polling gives up (None = never)
            cancel_event: Event that aborts polling when set
            sleep: Sleep function, used when no cancel_event is given
            clock: Monotonic clock used for the deadline
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.max_attempts = max_attempts
        self.timeout = timeout
        self.cancel_event = cancel_event
        self.sleep = sleep
        self.clock = clock

    def await_completion(
        self,
        client: ApiClient,
        short_label: str,
        job_id: str,
        progress_hook: PollProgressHook | None = None,
    ) -> list[FileEntry]:
        """Block until the job is complete and return its file manifest.

        Args:
            client: API client
            short_label: Project identifier used in the job URL
            job_id: Job identifier returned by start_export
            progress_hook: Called with every pending snapshot

        Returns:
            File manifest of the completed job

        Raises:
            RequestError: A status request failed
            PollTimeoutError: The attempt cap or deadline was reached
            PollCancelledError: The cancellation event was set
        """
        deadline = None if self.timeout is None else self.clock() + self.timeout
        attempts = 0

        while True:
            self._raise_if_cancelled(job_id, attempts)

            attempts += 1
            try:
                job = fetch_job(client, short_label, job_id)
            except RequestError as e:
                logger.error(f"Failed to poll job status for job {job_id}: {e}")
                raise

            if job.is_complete:
                logger.info(f"Job {job_id} completed after {attempts} status check(s)")
                return list(job.files)

            logger.info(f"Job {job_id} progress: {job.progress}%. Status: {job.status}. Waiting...")
            if progress_hook:
                progress_hook(job)

            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise PollTimeoutError(
                    f"Job {job_id} not complete after {attempts} status checks",
                    job_id=job_id,
                    attempts=attempts,
                )
            if deadline is not None and self.clock() >= deadline:
                raise PollTimeoutError(
                    f"Job {job_id} not complete after {self.timeout}s",
                    job_id=job_id,
                    attempts=attempts,
                )

            self._wait(job_id, attempts)

    def _wait(self, job_id: str, attempts: int) -> None:
        if self.cancel_event is None:
            self.sleep(self.interval)
            return

        if self.cancel_event.wait(self.interval):
            self._raise_if_cancelled(job_id, attempts)

    def _raise_if_cancelled(self, job_id: str, attempts: int) -> None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise PollCancelledError(
                f"Polling of job {job_id} cancelled",
                job_id=job_id,
                attempts=attempts,
            )


def await_completion(
    client: ApiClient,
    short_label: str,
    job_id: str,
    progress_hook: PollProgressHook | None = None,
    interval: float = DEFAULT_POLL_INTERVAL,
) -> list[FileEntry]:
    """Poll without any bound until the job completes (see :class:`JobPoller`)."""
    poller = JobPoller(interval=interval)
    return poller.await_completion(client, short_label, job_id, progress_hook)
