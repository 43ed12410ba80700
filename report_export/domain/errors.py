"""Error types raised by export operations."""


class ReportExportError(Exception):
    """Base class for export workflow errors."""


class RequestError(ReportExportError):
    """A call to the remote service failed.

    Covers transport failures (``status_code`` is None), non-2xx responses
    and bodies that could not be decoded. The underlying exception is
    chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        method: str,
        url: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code


class PollError(ReportExportError):
    """Polling stopped before the job reported completion."""

    def __init__(self, message: str, *, job_id: str, attempts: int) -> None:
        super().__init__(message)
        self.job_id = job_id
        self.attempts = attempts


class PollTimeoutError(PollError):
    """The attempt cap or deadline was reached."""


class PollCancelledError(PollError):
    """The caller's cancellation signal was set."""
