"""Anthropic / Claude provider."""

from typing import Any

import structlog
from anthropic import AsyncAnthropic

from aiwork.errors import ProviderError
from aiwork.llm.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseLLMProvider

logger = structlog.get_logger(__name__)


class ClaudeProvider(BaseLLMProvider):
    """Anthropic messages API provider."""

    display_name = "Claude"

    def __init__(
        self, api_key: str, model: str = "claude-3-sonnet-20240229", **kwargs: Any
    ) -> None:
        super().__init__(api_key, model, **kwargs)
        self.client = AsyncAnthropic(api_key=api_key)

    async def complete(
        self,
        prompt: str,
        system_prompt: str = "",
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        request: dict = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system_prompt:
            request["system"] = system_prompt

        logger.debug("claude_request", model=self.model)
        try:
            response = await self.client.messages.create(**request)
            return response.content[0].text

        except Exception as e:
            raise ProviderError("claude", f"Claude API error: {e}") from e
