"""LLM integration for work report generation."""

from aiwork.llm.base import BaseLLMProvider
from aiwork.llm.claude_provider import ClaudeProvider
from aiwork.llm.gemini_provider import GeminiProvider
from aiwork.llm.openai_provider import OpenAIProvider
from aiwork.llm.openrouter_provider import OpenRouterProvider
from aiwork.llm.prompts import NO_COMMITS_MESSAGE, SYSTEM_PROMPT, format_commits
from aiwork.llm.registry import (
    DEFAULT_PROVIDER,
    PROVIDERS,
    ProviderDescriptor,
    ProviderId,
    create_provider,
    get_provider_info,
    get_provider_models,
)
from aiwork.llm.report import GenerationRequest, generate_report

__all__ = [
    "BaseLLMProvider",
    "OpenAIProvider",
    "ClaudeProvider",
    "GeminiProvider",
    "OpenRouterProvider",
    "NO_COMMITS_MESSAGE",
    "SYSTEM_PROMPT",
    "format_commits",
    "DEFAULT_PROVIDER",
    "PROVIDERS",
    "ProviderDescriptor",
    "ProviderId",
    "create_provider",
    "get_provider_info",
    "get_provider_models",
    "GenerationRequest",
    "generate_report",
]
