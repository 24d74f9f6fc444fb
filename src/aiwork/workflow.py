"""Orchestration of a work report run: settings resolution and the report pipeline."""

from pathlib import Path
from typing import Awaitable, Callable, Optional

import structlog

from aiwork.errors import MissingCredentialError, UnsupportedProviderError
from aiwork.extraction import GitExtractor
from aiwork.interactive import Prompter
from aiwork.llm.prompts import NO_COMMITS_MESSAGE, format_commits
from aiwork.llm.registry import (
    DEFAULT_PROVIDER,
    PROVIDERS,
    ProviderDescriptor,
    ProviderId,
)
from aiwork.llm.report import GenerationRequest, generate_report
from aiwork.models import RepositoryConfig, Settings
from aiwork.notify.slack import validate_webhook_url

logger = structlog.get_logger(__name__)

ReportGenerator = Callable[[GenerationRequest], Awaitable[str]]


def resolve_provider(flag: Optional[str], settings: Settings) -> ProviderDescriptor:
    """Pick the provider: flag, then LLM_PROVIDER, then the default provider.

    Raises:
        UnsupportedProviderError: If the chosen identifier is not supported
    """
    value = flag or settings.llm_provider or DEFAULT_PROVIDER.value
    return PROVIDERS[ProviderId.parse(value)]


def resolve_api_key(
    flag: Optional[str],
    descriptor: ProviderDescriptor,
    settings: Settings,
    prompter: Prompter,
) -> str:
    """Pick the credential: flag, then the provider's env key, then ask.

    Raises:
        MissingCredentialError: If no credential was supplied after asking
    """
    api_key = flag or settings.credential_for(descriptor.env_key)
    if not api_key:
        api_key = prompter.secret(f"Please enter your {descriptor.name} API key")
    if not api_key:
        raise MissingCredentialError(descriptor.name, descriptor.env_key)
    return api_key


def _settings_model(descriptor: ProviderDescriptor, settings: Settings) -> Optional[str]:
    """DEFAULT_MODEL, but only when it was saved for this provider."""
    if not settings.default_model:
        return None
    try:
        saved_provider = ProviderId.parse(settings.llm_provider)
    except UnsupportedProviderError:
        return None
    return settings.default_model if saved_provider == descriptor.id else None


def resolve_model(
    flag: Optional[str],
    descriptor: ProviderDescriptor,
    settings: Settings,
    prompter: Prompter,
) -> str:
    """Pick the model: flag, then DEFAULT_MODEL, then the provider default.

    Without a flag, every provider except the default one asks the user to
    pick from its model list, offering the resolved model as the default.
    """
    if flag:
        return flag

    model = _settings_model(descriptor, settings) or descriptor.default_model
    if descriptor.id != DEFAULT_PROVIDER and descriptor.models:
        model = prompter.choose(
            f"Select {descriptor.name} model",
            list(descriptor.models),
            default=model,
        )
    return model


def resolve_webhook_url(flag: Optional[str], settings: Settings, prompter: Prompter) -> str:
    """Pick the Slack webhook URL: flag, then SLACK_WEBHOOK_URL, then ask."""
    url = flag or settings.slack_webhook_url
    if url:
        return url
    return prompter.text(
        "Enter your Slack webhook URL",
        validate=validate_webhook_url,
        error="Invalid Slack webhook URL format",
    )


async def generate_work_report(
    provider: str,
    api_key: str,
    model: Optional[str] = None,
    repo_path: Path = Path("."),
    days: int = 1,
    author_email: Optional[str] = None,
    generator: ReportGenerator = generate_report,
) -> str:
    """Read recent commits and turn them into a work report.

    Args:
        provider: Provider identifier
        api_key: Credential for the provider
        model: Model override
        repo_path: Repository to read
        days: Lookback window in days
        author_email: Optional author filter
        generator: Callable producing the report from a GenerationRequest

    Returns:
        The report, or NO_COMMITS_MESSAGE when the window holds no commits

    Raises:
        UnsupportedProviderError: For unknown providers, before reading history
        RetrievalError: If the history cannot be read
        ProviderError: If the model call fails
    """
    provider_id = ProviderId.parse(provider)

    extractor = GitExtractor(RepositoryConfig(repo_path=repo_path))
    commits = extractor.extract_commits(days=days, author_email=author_email)
    if not commits:
        logger.info("no_commits", repo=str(repo_path), days=days)
        return NO_COMMITS_MESSAGE

    request = GenerationRequest(
        provider=provider_id.value,
        api_key=api_key,
        model=model,
        prompt=format_commits(commits),
    )
    return await generator(request)
