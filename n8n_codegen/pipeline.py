"""End-to-end conversion operations: fetch, generate, refactor."""

from typing import Optional

import httpx
import structlog

from n8n_codegen.ai.code_refactor import AIRewriteAdapter
from n8n_codegen.generator.engine import CodeGenerator
from n8n_codegen.n8n.client import create_n8n_client, fetch_workflow
from n8n_codegen.refactor.orchestrator import RefactorOrchestrator, refactor_generated_code

__all__ = ["convert_workflow_to_code", "refactor_generated_code"]

logger = structlog.get_logger(__name__)


async def convert_workflow_to_code(
    workflow_id: str,
    intent: str = "",
    use_ai: bool = True,
    client: Optional[httpx.AsyncClient] = None,
    generator: Optional[CodeGenerator] = None,
    ai_adapter: Optional[AIRewriteAdapter] = None,
) -> str:
    """Fetch a workflow from n8n and return its generated (and refactored) code.

    Errors from the n8n fetch are not caught here.
    """
    generator = generator or CodeGenerator()

    if client is None:
        async with create_n8n_client() as owned_client:
            workflow = await fetch_workflow(owned_client, workflow_id)
    else:
        workflow = await fetch_workflow(client, workflow_id)

    code = generator.generate(workflow)
    logger.info("workflow_converted", workflow_id=workflow_id, nodes=len(workflow.nodes))

    if intent:
        code = await RefactorOrchestrator(ai_adapter=ai_adapter).refactor(code, intent, use_ai)
    return code
