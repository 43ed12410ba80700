"""Artifact download."""

import logging
from pathlib import Path

from atomicwrites import atomic_write

from report_export.domain.errors import RequestError
from report_export.domain.models import FileEntry
from report_export.domain.services import EXPORT_FILE_NAME, ManifestService
from report_export.operations.client import ApiClient

logger = logging.getLogger(__name__)


def download_export(
    client: ApiClient,
    files: list[FileEntry],
    project_label: str,
    dest_dir: Path = Path("."),
    target_name: str = EXPORT_FILE_NAME,
) -> Path | None:
    """Download the export archive of a completed job.

    Args:
        client: API client
        files: File manifest of the completed job
        project_label: Display label used in the output filename
        dest_dir: Directory the archive is written to
        target_name: Visible name of the manifest entry to download

    Returns:
        Path of the written archive, or None if the manifest has no matching entry
    """
    entry = ManifestService.select_export_file(files, target_name)
    if entry is None:
        logger.warning(f'No file named "{target_name}" found for project {project_label}')
        return None

    if not entry.rest_url:
        logger.error(f'File "{target_name}" of project {project_label} has no download URL')
        raise RequestError(
            f'Manifest entry "{target_name}" has no restUrl',
            method="GET",
            url="",
        )

    try:
        content = client.get_binary(entry.rest_url)
    except RequestError as e:
        logger.error(f"Failed to download file for project {project_label}: {e}")
        raise

    dest = Path(dest_dir) / ManifestService.build_output_filename(project_label)
    try:
        with atomic_write(dest, mode="wb", overwrite=True) as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to write {dest}: {e}")
        raise

    logger.info(f"File saved as {dest}")
    return dest
