"""Example: Using report_export as an SDK.

This example demonstrates how to use report_export programmatically
as a Python library (SDK) rather than via the CLI.
"""

import os
import signal
import threading
from pathlib import Path

from report_export import (
    ApiClient,
    BulkExport,
    JobPoller,
    Reporter,
    Settings,
    export_reports,
)
from report_export.operations import list_projects


def example_environment_config():
    """Load credentials from environment variables and export everything."""
    print("=" * 60)
    print("Example 1: Environment Configuration")
    print("=" * 60)

    os.environ.setdefault("REPORT_EXPORT_API_TOKEN", "change-me")
    os.environ.setdefault("REPORT_EXPORT_BASE_URL", "https://reports.example.com")

    summary = export_reports()
    print(f"Exported {len(summary.exported)} project(s)")


def example_bounded_polling():
    """Give up on jobs that take longer than ten minutes."""
    print("\n" + "=" * 60)
    print("Example 2: Bounded Polling")
    print("=" * 60)

    settings = Settings(
        api_token="change-me",
        base_url="https://reports.example.com",
        output_dir=Path("exports"),
        poll_interval=10,
        poll_timeout=600,
    )

    summary = export_reports(config=settings)
    for result in summary.failed:
        print(f"  {result.project.label}: {result.error}")


def example_headless_mode():
    """Use silent reporter for headless/server mode."""
    print("\n" + "=" * 60)
    print("Example 3: Headless Mode (No Terminal Output)")
    print("=" * 60)

    settings = Settings(api_token="change-me", base_url="https://reports.example.com")

    # Use silent mode for no output (good for cron jobs, servers)
    summary = export_reports(config=settings, reporter=Reporter(silent=True))
    print(f"Done: {summary!r}")


def example_cancellable_run():
    """Stop polling cleanly on Ctrl+C instead of blocking on a stuck job."""
    print("\n" + "=" * 60)
    print("Example 4: Cancellation")
    print("=" * 60)

    settings = Settings(api_token="change-me", base_url="https://reports.example.com")
    cancel = threading.Event()
    signal.signal(signal.SIGINT, lambda signum, frame: cancel.set())

    orchestrator = BulkExport(settings, cancel_event=cancel)
    summary = orchestrator.run()
    print(f"Aborted: {summary.aborted}")


def example_shared_client():
    """Reuse one client for listing and exporting selected projects."""
    print("\n" + "=" * 60)
    print("Example 5: Shared Client")
    print("=" * 60)

    settings = Settings(api_token="change-me", base_url="https://reports.example.com")

    with ApiClient(settings.base_url, settings.api_token) as client:
        projects = list_projects(client)
        wanted = [p.short_label for p in projects if p.label.startswith("Demo")]

        orchestrator = BulkExport(settings, client=client, poller=JobPoller(interval=2))
        orchestrator.run(only=wanted)


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Report Export SDK Examples")
    print("=" * 60)
    print("\nThese examples show different ways to use report_export")
    print("as a Python library (SDK) in your own code.\n")

    # Uncomment the examples you want to run:

    # example_environment_config()
    # example_bounded_polling()
    # example_headless_mode()
    # example_cancellable_run()
    # example_shared_client()

    print("\nTo run an example, uncomment it in the __main__ section.")
