"""OpenAI-compatible chat completion provider."""

import httpx
from typing import Dict, List, Optional, Any
from dataclasses import dataclass
import structlog

from n8n_codegen.exceptions import UpstreamError

logger = structlog.get_logger(__name__)


@dataclass
class OpenAIConfig:
    """OpenAI configuration."""
    api_key: str
    base_url: str = "https://api.openai.com/v1"
    default_model: str = "gpt-3.5-turbo"
    temperature: float = 0.0
    timeout: Optional[float] = 60.0


class OpenAIProvider:
    """Chat completion client for OpenAI-compatible endpoints.

    A caller-owned ``httpx.AsyncClient`` may be passed in; otherwise a
    short-lived client is opened for each request.
    """

    def __init__(self, config: OpenAIConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._client = client

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

    def build_payload(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        return {
            "model": model or self.config.default_model,
            "messages": messages,
            "temperature": self.config.temperature if temperature is None else temperature,
        }

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Get a single completion and return its message content."""
        messages = []

        if system_prompt:
            messages.append({
                "role": "system",
                "content": system_prompt
            })

        messages.append({
            "role": "user",
            "content": prompt
        })

        payload = self.build_payload(messages, model=model, temperature=temperature)
        url = f"{self.config.base_url.rstrip('/')}/chat/completions"

        try:
            if self._client is not None:
                response = await self._client.post(url, json=payload, headers=self.headers)
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                    response = await client.post(url, json=payload, headers=self.headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(
                "openai_request_error",
                error=str(e),
                model=payload["model"]
            )
            raise UpstreamError("OpenAI", None, str(e)) from e

        if not response.is_success:
            logger.error(
                "openai_completion_error",
                status=response.status_code,
                model=payload["model"]
            )
            raise UpstreamError("OpenAI", response.status_code, response.text)

        try:
            data = response.json()
            return data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise UpstreamError("OpenAI", response.status_code, f"Malformed completion response: {response.text}") from e
