"""OpenAI LLM provider implementation."""

from typing import Any

import structlog
from openai import AsyncOpenAI

from aiwork.errors import ProviderError
from aiwork.llm.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseLLMProvider

logger = structlog.get_logger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """OpenAI chat completions provider."""

    display_name = "OpenAI"

    def __init__(self, api_key: str, model: str = "gpt-3.5-turbo", **kwargs: Any) -> None:
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Model for completions
            **kwargs: Additional parameters
        """
        super().__init__(api_key, model, **kwargs)
        self.client = AsyncOpenAI(api_key=api_key)

    async def complete(
        self,
        prompt: str,
        system_prompt: str = "",
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        """Generate a completion from OpenAI.

        Raises:
            ProviderError: If API call fails
        """
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        logger.debug("openai_request", model=self.model)
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
            return response.choices[0].message.content or ""

        except Exception as e:
            raise ProviderError("openai", f"OpenAI API error: {e}") from e
