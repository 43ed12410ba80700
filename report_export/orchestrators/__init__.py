"""Orchestration layer.

This module contains the high-level workflow orchestrator that coordinates
the execution of export operations.
"""

from report_export.orchestrators.bulk_export import BulkExport

__all__ = [
    "BulkExport",
]
