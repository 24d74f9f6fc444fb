"""OpenRouter provider, called over its REST API."""

from typing import Any, Optional

import httpx
import structlog

from aiwork.errors import ProviderError
from aiwork.llm.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseLLMProvider

logger = structlog.get_logger(__name__)

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
REFERER = "https://github.com/git-work-reporter"
APP_TITLE = "Git Work Reporter"


class OpenRouterProvider(BaseLLMProvider):
    """OpenRouter chat completions provider.

    OpenRouter speaks the OpenAI wire format but routes to many vendors, so
    the request is a plain POST rather than an SDK call.
    """

    display_name = "OpenRouter"

    def __init__(
        self,
        api_key: str,
        model: str = "openai/gpt-3.5-turbo",
        http_client: Optional[httpx.AsyncClient] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize OpenRouter provider.

        Args:
            api_key: OpenRouter API key
            model: Model slug, e.g. ``anthropic/claude-3-opus``
            http_client: Client to send the request with (a new one per call if None)
            **kwargs: Additional parameters
        """
        super().__init__(api_key, model, **kwargs)
        self.http_client = http_client

    async def complete(
        self,
        prompt: str,
        system_prompt: str = "",
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": REFERER,
            "X-Title": APP_TITLE,
        }

        logger.debug("openrouter_request", model=self.model)
        try:
            if self.http_client is not None:
                resp = await self.http_client.post(OPENROUTER_URL, json=payload, headers=headers)
            else:
                async with httpx.AsyncClient() as client:
                    resp = await client.post(OPENROUTER_URL, json=payload, headers=headers)
            resp.raise_for_status()
            data = resp.json()
        except Exception as e:
            raise ProviderError("openrouter", f"OpenRouter API error: {e}") from e

        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices:
            error = data.get("error") if isinstance(data, dict) else None
            message = error.get("message") if isinstance(error, dict) else None
            raise ProviderError(
                "openrouter", f"OpenRouter API error: {message or 'response contained no choices'}"
            )

        return choices[0].get("message", {}).get("content") or ""
