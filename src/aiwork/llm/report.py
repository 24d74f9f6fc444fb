"""Work report generation."""

from typing import Optional

from pydantic import BaseModel, Field

from aiwork.llm.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from aiwork.llm.prompts import SYSTEM_PROMPT, build_user_prompt
from aiwork.llm.registry import create_provider


class GenerationRequest(BaseModel):
    """Everything needed for one report generation call."""

    provider: str = Field(..., description="Provider identifier")
    api_key: str = Field(..., description="Credential for the provider")
    model: Optional[str] = Field(None, description="Model override")
    prompt: str = Field(..., description="Formatted commit log text")


async def generate_report(request: GenerationRequest) -> str:
    """Ask the selected provider for a work report.

    Args:
        request: Provider selection, credential and formatted commits

    Returns:
        The report text as returned by the model

    Raises:
        UnsupportedProviderError: Before any network access, for unknown providers
        ProviderError: If the remote call fails
    """
    provider = create_provider(request.provider, request.api_key, request.model)
    return await provider.complete(
        build_user_prompt(request.prompt),
        system_prompt=SYSTEM_PROMPT,
        max_tokens=DEFAULT_MAX_TOKENS,
        temperature=DEFAULT_TEMPERATURE,
    )
