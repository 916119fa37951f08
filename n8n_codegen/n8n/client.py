"""Read access to workflows stored in an n8n instance."""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from n8n_codegen.config import Settings, get_settings
from n8n_codegen.exceptions import UpstreamError
from n8n_codegen.workflow.models import Workflow
from n8n_codegen.workflow.parser import WorkflowParser

logger = logging.getLogger(__name__)


def create_n8n_client(settings: Optional[Settings] = None, **kwargs) -> httpx.AsyncClient:
    """Build an async client pointed at ``{N8N_URL}/api/v1``."""
    settings = settings or get_settings()
    return httpx.AsyncClient(
        base_url=settings.n8n_api_base,
        headers={
            "X-N8N-API-KEY": settings.n8n_api_key,
            "Content-Type": "application/json",
        },
        **kwargs
    )


async def fetch_workflow(client: httpx.AsyncClient, workflow_id: str) -> Workflow:
    """Retrieve one workflow by id.

    Network errors propagate as raised by httpx; a non-2xx answer raises
    :class:`UpstreamError` with the response body.
    """
    logger.debug(f"Fetching workflow {workflow_id}")
    response = await client.get(f"/workflows/{quote(str(workflow_id), safe='')}")

    if not response.is_success:
        raise UpstreamError("n8n", response.status_code, response.text)

    return WorkflowParser().parse_dict(response.json())
