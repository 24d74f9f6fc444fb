"""Base class for LLM providers."""

from abc import ABC, abstractmethod
from typing import Any

DEFAULT_MAX_TOKENS = 800
DEFAULT_TEMPERATURE = 0.7


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    #: Display name used to tag errors, e.g. "OpenAI"
    display_name: str = ""

    def __init__(self, api_key: str, model: str, **kwargs: Any) -> None:
        """Initialize the LLM provider.

        Args:
            api_key: API key for the provider
            model: Model name to use
            **kwargs: Additional provider-specific parameters
        """
        self.api_key = api_key
        self.model = model
        self.config = kwargs

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        system_prompt: str = "",
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        """Generate a completion from the LLM.

        Args:
            prompt: The user prompt to send
            system_prompt: Instruction describing the expected output
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature

        Returns:
            The generated text completion

        Raises:
            ProviderError: If the API call fails
        """
