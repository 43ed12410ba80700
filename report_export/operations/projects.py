"""Project listing."""

import logging

from report_export.domain.errors import RequestError
from report_export.domain.models import Project
from report_export.operations.client import ApiClient

logger = logging.getLogger(__name__)

PROJECT_LIST_PATH = "/rest/1/?output=project&pretty"


def list_projects(client: ApiClient) -> list[Project]:
    """Return projects from the listing endpoint, in the order the service returns them.

    Only the ``project`` field is read; a response without it raises
    ``KeyError`` and a malformed entry raises a pydantic ``ValidationError``.
    """
    try:
        payload = client.get(PROJECT_LIST_PATH)
    except RequestError as e:
        logger.error(f"Failed to fetch projects: {e}")
        raise

    return [Project.model_validate(item) for item in payload["project"]]
