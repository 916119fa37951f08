"""
End-to-end tests for fetching, generating and refactoring workflow code.
"""

from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from n8n_codegen.ai.code_refactor import AIRewriteAdapter
from n8n_codegen.exceptions import UpstreamError
from n8n_codegen.generator.engine import CodeGenerator
from n8n_codegen.pipeline import convert_workflow_to_code


@pytest.fixture
def n8n_client(sample_workflow_data):
    def handler(request):
        if request.url.path.endswith("/workflows/42"):
            return httpx.Response(200, json=sample_workflow_data)
        return httpx.Response(404, text="Not Found")
    return httpx.AsyncClient(base_url="http://n8n.local/api/v1", transport=httpx.MockTransport(handler))


class TestConvertWorkflowToCode:

    @pytest.mark.asyncio
    async def test_without_intent(self, n8n_client, sample_workflow_data):
        async with n8n_client:
            code = await convert_workflow_to_code("42", client=n8n_client)

        assert code == CodeGenerator().generate(sample_workflow_data)

    @pytest.mark.asyncio
    async def test_with_rule_intent(self, n8n_client):
        async with n8n_client:
            code = await convert_workflow_to_code("42", intent="use const", use_ai=False, client=n8n_client)

        assert "  const total = 0;" in code
        assert "let total" not in code

    @pytest.mark.asyncio
    async def test_ai_failure_falls_back(self, n8n_client):
        adapter = Mock(spec=AIRewriteAdapter)
        adapter.available = True
        adapter.rewrite = AsyncMock(side_effect=UpstreamError("OpenAI", 500, "down"))

        async with n8n_client:
            code = await convert_workflow_to_code(
                "42", intent="use const", use_ai=True, client=n8n_client, ai_adapter=adapter
            )

        adapter.rewrite.assert_awaited_once()
        assert "  const total = 0;" in code

    @pytest.mark.asyncio
    async def test_fetch_errors_surface(self, n8n_client):
        async with n8n_client:
            with pytest.raises(UpstreamError):
                await convert_workflow_to_code("7", client=n8n_client)

    @pytest.mark.asyncio
    async def test_graph_order_generator(self, n8n_client):
        async with n8n_client:
            code = await convert_workflow_to_code("42", client=n8n_client, generator=CodeGenerator(order="graph"))

        assert code.index("// Start (") < code.index("// Get Users (") < code.index("// Transform (")

    @pytest.mark.asyncio
    async def test_owns_client_when_none_given(self, n8n_client):
        with patch("n8n_codegen.pipeline.create_n8n_client", return_value=n8n_client) as factory:
            code = await convert_workflow_to_code("42")

        factory.assert_called_once_with()
        assert n8n_client.is_closed
        assert "// Get Users (n8n-nodes-base.httpRequest)" in code
