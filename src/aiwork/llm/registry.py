"""Supported providers, their metadata and the provider factory."""

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Type

import structlog
from pydantic import BaseModel, ConfigDict

from aiwork.errors import UnsupportedProviderError
from aiwork.llm.base import BaseLLMProvider
from aiwork.llm.claude_provider import ClaudeProvider
from aiwork.llm.gemini_provider import GeminiProvider
from aiwork.llm.openai_provider import OpenAIProvider
from aiwork.llm.openrouter_provider import OpenRouterProvider

logger = structlog.get_logger(__name__)


class ProviderId(str, Enum):
    """Identifiers of the supported LLM services."""

    OPENAI = "openai"
    CLAUDE = "claude"
    GEMINI = "gemini"
    OPENROUTER = "openrouter"

    @classmethod
    def parse(cls, value: str) -> "ProviderId":
        """Resolve a user-supplied identifier, accepting aliases.

        Raises:
            UnsupportedProviderError: If the identifier is not recognized
        """
        key = (value or "").strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedProviderError(value) from None


_ALIASES = {
    "anthropic": "claude",
    "google": "gemini",
}

DEFAULT_PROVIDER = ProviderId.OPENAI


class ProviderDescriptor(BaseModel):
    """Static display and lookup metadata for a provider."""

    model_config = ConfigDict(frozen=True)

    id: ProviderId
    name: str
    env_key: str
    default_model: str
    description: str
    models: Tuple[str, ...]


PROVIDERS: Mapping[ProviderId, ProviderDescriptor] = MappingProxyType(
    {
        ProviderId.OPENAI: ProviderDescriptor(
            id=ProviderId.OPENAI,
            name="OpenAI",
            env_key="OPENAI_API_KEY",
            default_model="gpt-3.5-turbo",
            description="OpenAI GPT models",
            models=(
                "gpt-3.5-turbo",
                "gpt-3.5-turbo-16k",
                "gpt-4",
                "gpt-4-turbo-preview",
                "gpt-4-32k",
            ),
        ),
        ProviderId.CLAUDE: ProviderDescriptor(
            id=ProviderId.CLAUDE,
            name="Claude (Anthropic)",
            env_key="ANTHROPIC_API_KEY",
            default_model="claude-3-sonnet-20240229",
            description="Anthropic Claude models",
            models=(
                "claude-3-opus-20240229",
                "claude-3-sonnet-20240229",
                "claude-3-haiku-20240307",
                "claude-2.1",
                "claude-instant-1.2",
            ),
        ),
        ProviderId.GEMINI: ProviderDescriptor(
            id=ProviderId.GEMINI,
            name="Google Gemini",
            env_key="GEMINI_API_KEY",
            default_model="gemini-pro",
            description="Google Gemini models",
            models=(
                "gemini-pro",
                "gemini-1.5-pro-latest",
                "gemini-1.5-flash-latest",
            ),
        ),
        ProviderId.OPENROUTER: ProviderDescriptor(
            id=ProviderId.OPENROUTER,
            name="OpenRouter",
            env_key="OPENROUTER_API_KEY",
            default_model="openai/gpt-3.5-turbo",
            description="Access multiple LLMs through OpenRouter",
            models=(
                "openai/gpt-3.5-turbo",
                "openai/gpt-4",
                "anthropic/claude-3-opus",
                "anthropic/claude-3-sonnet",
                "google/gemini-pro",
                "meta-llama/llama-3-70b-instruct",
                "mistralai/mixtral-8x7b-instruct",
            ),
        ),
    }
)

_PROVIDER_CLASSES: Dict[ProviderId, Type[BaseLLMProvider]] = {
    ProviderId.OPENAI: OpenAIProvider,
    ProviderId.CLAUDE: ClaudeProvider,
    ProviderId.GEMINI: GeminiProvider,
    ProviderId.OPENROUTER: OpenRouterProvider,
}

_missing = (set(ProviderId) - set(PROVIDERS)) | (set(ProviderId) - set(_PROVIDER_CLASSES))
if _missing:
    raise RuntimeError(f"Providers without a registry entry: {sorted(p.value for p in _missing)}")


def get_provider_info(provider: str) -> Optional[ProviderDescriptor]:
    """Return display metadata for a provider, or None if unsupported."""
    try:
        return PROVIDERS[ProviderId.parse(provider)]
    except UnsupportedProviderError:
        return None


def get_provider_models(provider: str) -> List[str]:
    """Return the selectable model identifiers for a provider.

    Unsupported providers yield an empty list.
    """
    info = get_provider_info(provider)
    return list(info.models) if info else []


def create_provider(provider: str, api_key: str, model: Optional[str] = None) -> BaseLLMProvider:
    """Build the provider client for an identifier.

    Args:
        provider: Provider identifier (aliases accepted)
        api_key: Credential for the provider
        model: Model override, defaults to the provider's default model

    Returns:
        A ready-to-use provider instance

    Raises:
        UnsupportedProviderError: If the identifier is not recognized
    """
    provider_id = ProviderId.parse(provider)
    descriptor = PROVIDERS[provider_id]
    provider_cls = _PROVIDER_CLASSES[provider_id]

    resolved_model = model or descriptor.default_model
    logger.debug("provider_selected", provider=provider_id.value, model=resolved_model)
    return provider_cls(api_key=api_key, model=resolved_model)
