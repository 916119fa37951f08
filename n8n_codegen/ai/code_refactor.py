"""LLM-backed rewrite of generated workflow code."""

from typing import Optional

import httpx
import structlog

from n8n_codegen.config import Settings, get_settings
from n8n_codegen.exceptions import ConfigurationError, UpstreamError
from .providers.openai import OpenAIConfig, OpenAIProvider

logger = structlog.get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a Node.js expert who refactors n8n generated code. "
    "Respond with the updated code only."
)


def build_refactor_prompt(code: str, intent: str) -> str:
    return f"Refactor according to: {intent}\n\n{code}"


class AIRewriteAdapter:
    """Sends generated code plus an intent to a chat model and returns its answer.

    The adapter is optional: ``available`` is False while no API key is
    configured, and :meth:`rewrite` raises :class:`ConfigurationError` in
    that state.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider: Optional[OpenAIProvider] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings()
        self._provider = provider
        self._client = client

    @property
    def available(self) -> bool:
        return self._provider is not None or bool(self.settings.openai_api_key)

    @property
    def provider(self) -> OpenAIProvider:
        if self._provider is None:
            if not self.settings.openai_api_key:
                raise ConfigurationError("OPENAI_API_KEY not set")
            self._provider = OpenAIProvider(
                OpenAIConfig(
                    api_key=self.settings.openai_api_key,
                    base_url=self.settings.openai_base_url,
                    default_model=self.settings.openai_model,
                ),
                client=self._client,
            )
        return self._provider

    async def rewrite(self, code: str, intent: str) -> str:
        """Return the model's rewrite of ``code``; errors are not contained here."""
        provider = self.provider
        logger.info("ai_refactor_started", model=provider.config.default_model, intent=intent)

        content = await provider.complete(
            build_refactor_prompt(code, intent),
            system_prompt=SYSTEM_PROMPT,
            temperature=0,
        )
        if not isinstance(content, str):
            raise UpstreamError("OpenAI", None, "Completion has no text content")

        return content.strip()


async def ai_refactor_generated_code(code: str, intent: str, settings: Optional[Settings] = None) -> str:
    """Standalone AI rewrite; raises ConfigurationError/UpstreamError."""
    return await AIRewriteAdapter(settings=settings).rewrite(code, intent)
