"""Tests for the KEY=value settings file."""

import pytest

from aiwork.llm.registry import PROVIDERS, ProviderId
from aiwork.models import Settings
from aiwork.settings_file import read_settings, render_settings, write_settings


def test_render_settings(slack_url):
    """Test the file layout."""
    text = render_settings(ProviderId.CLAUDE, "sk-ant", "claude-2.1", slack_url)

    assert text.splitlines() == [
        "LLM_PROVIDER='claude'",
        "ANTHROPIC_API_KEY='sk-ant'",
        "DEFAULT_MODEL='claude-2.1'",
        f"SLACK_WEBHOOK_URL='{slack_url}'",
    ]


def test_render_settings_without_webhook():
    """Test the webhook line is omitted when not configured."""
    text = render_settings(ProviderId.OPENAI, "sk", "gpt-4")

    assert "SLACK_WEBHOOK_URL" not in text


@pytest.mark.parametrize("provider_id", list(ProviderId))
def test_settings_round_trip(tmp_path, provider_id):
    """Test a written file reads back to the same provider, model and key."""
    descriptor = PROVIDERS[provider_id]
    model = descriptor.models[-1]
    path = write_settings(tmp_path / ".env", provider_id, "secret-key", model)

    values = read_settings(path)
    assert values == {
        "LLM_PROVIDER": provider_id.value,
        descriptor.env_key: "secret-key",
        "DEFAULT_MODEL": model,
    }

    settings = Settings(_env_file=path)
    assert ProviderId.parse(settings.llm_provider) is provider_id
    assert settings.default_model == model
    assert settings.credential_for(descriptor.env_key) == "secret-key"


def test_write_settings_replaces_file(tmp_path):
    """Test writing replaces previous settings."""
    path = tmp_path / ".env"
    path.write_text("OLD_KEY=1\n")

    write_settings(path, ProviderId.GEMINI, "g-key", "gemini-pro")

    assert "OLD_KEY" not in read_settings(path)


def test_read_missing_file(tmp_path):
    """Test a missing file reads as empty."""
    assert read_settings(tmp_path / "absent.env") == {}


@pytest.mark.parametrize(
    "api_key",
    ["sk-abc #def", "it's \"quoted\"", "back\\slash", "trailing # comment'"],
)
def test_settings_round_trip_special_characters(tmp_path, api_key):
    """Test keys with comment markers, quotes and backslashes survive a round trip."""
    path = write_settings(tmp_path / ".env", ProviderId.OPENAI, api_key, "gpt-4")

    assert read_settings(path)["OPENAI_API_KEY"] == api_key
    assert Settings(_env_file=path).openai_api_key == api_key
