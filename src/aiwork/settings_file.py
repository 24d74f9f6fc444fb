"""Reading and writing the flat KEY=value settings file."""

from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from aiwork.llm.registry import PROVIDERS, ProviderId


def _quote(value: str) -> str:
    # Single-quoted dotenv values only decode \\ and \'
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render_settings(
    provider: ProviderId,
    api_key: str,
    model: str,
    webhook_url: Optional[str] = None,
) -> str:
    """Render settings as quoted ``KEY='value'`` lines."""
    descriptor = PROVIDERS[provider]
    lines = [
        f"LLM_PROVIDER={_quote(provider.value)}",
        f"{descriptor.env_key}={_quote(api_key)}",
        f"DEFAULT_MODEL={_quote(model)}",
    ]
    if webhook_url:
        lines.append(f"SLACK_WEBHOOK_URL={_quote(webhook_url)}")
    return "\n".join(lines) + "\n"


def write_settings(
    path: Union[str, Path],
    provider: ProviderId,
    api_key: str,
    model: str,
    webhook_url: Optional[str] = None,
) -> Path:
    """Write settings to ``path``, replacing any existing file.

    Returns:
        The path written to
    """
    path = Path(path)
    path.write_text(render_settings(provider, api_key, model, webhook_url), encoding="utf-8")
    return path


def read_settings(path: Union[str, Path]) -> Dict[str, str]:
    """Read a settings file into a dict, skipping keys without a value."""
    values = dotenv_values(Path(path))
    return {key: value for key, value in values.items() if value is not None}
