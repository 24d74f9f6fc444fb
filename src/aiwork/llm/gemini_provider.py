"""Google Gemini provider."""

from typing import Any

import structlog
from google import genai
from google.genai import types

from aiwork.errors import ProviderError
from aiwork.llm.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseLLMProvider

logger = structlog.get_logger(__name__)


class GeminiProvider(BaseLLMProvider):
    """Gemini generate-content provider."""

    display_name = "Gemini"

    def __init__(self, api_key: str, model: str = "gemini-pro", **kwargs: Any) -> None:
        super().__init__(api_key, model, **kwargs)
        self.client = genai.Client(api_key=api_key)

    async def complete(
        self,
        prompt: str,
        system_prompt: str = "",
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        config = types.GenerateContentConfig(
            system_instruction=system_prompt or None,
            temperature=temperature,
            max_output_tokens=max_tokens,
        )

        logger.debug("gemini_request", model=self.model)
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
            return response.text or ""

        except Exception as e:
            raise ProviderError("gemini", f"Gemini API error: {e}") from e
