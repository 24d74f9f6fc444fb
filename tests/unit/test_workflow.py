"""Tests for provider, credential, model and webhook resolution."""

import pytest

from aiwork.errors import MissingCredentialError, UnsupportedProviderError
from aiwork.llm.registry import PROVIDERS, ProviderId
from aiwork.models import Settings
from aiwork.workflow import (
    resolve_api_key,
    resolve_model,
    resolve_provider,
    resolve_webhook_url,
)


def make_settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


def test_resolve_provider_order():
    """Test flag, then settings, then the default provider."""
    assert resolve_provider(None, make_settings()).id is ProviderId.OPENAI
    assert resolve_provider(None, make_settings(llm_provider="gemini")).id is ProviderId.GEMINI
    assert resolve_provider("claude", make_settings(llm_provider="gemini")).id is ProviderId.CLAUDE


def test_resolve_provider_unsupported():
    """Test an unknown provider raises a configuration error."""
    with pytest.raises(UnsupportedProviderError):
        resolve_provider("cohere", make_settings())


def test_resolve_provider_from_environment(monkeypatch):
    """Test LLM_PROVIDER is read from the environment."""
    monkeypatch.setenv("LLM_PROVIDER", "openrouter")

    assert resolve_provider(None, Settings(_env_file=None)).id is ProviderId.OPENROUTER


def test_resolve_api_key_flag_wins(prompter):
    """Test the flag wins over settings and no prompt is shown."""
    settings = make_settings(anthropic_api_key="from-env")

    key = resolve_api_key("from-flag", PROVIDERS[ProviderId.CLAUDE], settings, prompter)

    assert key == "from-flag"
    assert prompter.asked == []


def test_resolve_api_key_from_settings(prompter):
    """Test the provider's env key is used when no flag is given."""
    settings = make_settings(gemini_api_key="from-env")

    assert resolve_api_key(None, PROVIDERS[ProviderId.GEMINI], settings, prompter) == "from-env"
    assert prompter.asked == []


def test_resolve_api_key_prompts(prompter):
    """Test the user is asked when no credential is configured."""
    key = resolve_api_key(None, PROVIDERS[ProviderId.OPENAI], make_settings(), prompter)

    assert key == "prompted-key"
    assert prompter.asked == ["Please enter your OpenAI API key"]


def test_resolve_api_key_missing(prompter_factory):
    """Test an empty answer is a missing credential."""
    prompter = prompter_factory(secret="")

    with pytest.raises(MissingCredentialError, match="OPENROUTER_API_KEY"):
        resolve_api_key(None, PROVIDERS[ProviderId.OPENROUTER], make_settings(), prompter)


def test_resolve_model_flag_skips_selection(prompter):
    """Test an explicit model is used as is."""
    model = resolve_model("claude-2.1", PROVIDERS[ProviderId.CLAUDE], make_settings(), prompter)

    assert model == "claude-2.1"
    assert prompter.asked == []


def test_resolve_model_default_provider_skips_selection(prompter):
    """Test the default provider never asks for a model."""
    model = resolve_model(None, PROVIDERS[ProviderId.OPENAI], make_settings(), prompter)

    assert model == "gpt-3.5-turbo"
    assert prompter.asked == []


def test_resolve_model_default_provider_uses_saved_model(prompter):
    """Test DEFAULT_MODEL applies when saved for the same provider."""
    settings = make_settings(llm_provider="openai", default_model="gpt-4")

    assert resolve_model(None, PROVIDERS[ProviderId.OPENAI], settings, prompter) == "gpt-4"


def test_resolve_model_other_provider_asks(prompter_factory):
    """Test non-default providers ask the user to pick a model."""
    prompter = prompter_factory(choices={"Gemini": "gemini-1.5-flash-latest"})

    model = resolve_model(None, PROVIDERS[ProviderId.GEMINI], make_settings(), prompter)

    assert model == "gemini-1.5-flash-latest"
    assert prompter.asked == ["Select Google Gemini model"]


def test_resolve_model_selection_defaults_to_saved_model(prompter):
    """Test the saved model is offered as the default choice."""
    settings = make_settings(llm_provider="claude", default_model="claude-3-opus-20240229")

    model = resolve_model(None, PROVIDERS[ProviderId.CLAUDE], settings, prompter)

    assert model == "claude-3-opus-20240229"


def test_resolve_model_ignores_model_saved_for_other_provider(prompter):
    """Test DEFAULT_MODEL saved for another provider is not reused."""
    settings = make_settings(llm_provider="claude", default_model="claude-2.1")

    assert resolve_model(None, PROVIDERS[ProviderId.OPENAI], settings, prompter) == "gpt-3.5-turbo"


def test_resolve_webhook_url(prompter_factory, slack_url):
    """Test flag, then settings, then a validated prompt."""
    other = slack_url.replace("B00000000", "B11111111")
    prompter = prompter_factory(text=slack_url)

    assert resolve_webhook_url(other, make_settings(slack_webhook_url=slack_url), prompter) == other
    assert resolve_webhook_url(None, make_settings(slack_webhook_url=other), prompter) == other
    assert prompter.asked == []

    assert resolve_webhook_url(None, make_settings(), prompter) == slack_url
    assert prompter.asked == ["Enter your Slack webhook URL"]
