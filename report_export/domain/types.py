"""Shared type definitions."""

from collections.abc import Callable

from report_export.domain.models import ExportJob

# Progress hook for polling (latest pending job snapshot)
PollProgressHook = Callable[[ExportJob], None]

# Sleep function used between poll attempts (seconds)
SleepFunc = Callable[[float], None]

# Monotonic clock used for poll deadlines (seconds)
ClockFunc = Callable[[], float]
