"""Configuration models."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENV_FILE = ".env"


class RepositoryConfig(BaseModel):
    """Configuration for a Git repository to read history from."""

    repo_path: Path = Field(Path("."), description="Path to the Git repository")
    branch: str = Field("HEAD", description="Revision the history is read from")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM Settings
    llm_provider: str = "openai"
    default_model: Optional[str] = None
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None

    # Slack Settings
    slack_webhook_url: Optional[str] = None

    # Logging
    log_level: str = "WARNING"

    def credential_for(self, env_key: str) -> Optional[str]:
        """Return the credential stored under an environment key, if any.

        Args:
            env_key: Environment variable name, e.g. ``OPENAI_API_KEY``

        Returns:
            The credential or None when unset or empty
        """
        value = getattr(self, env_key.lower(), None)
        return value or None
