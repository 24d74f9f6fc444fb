"""Exception hierarchy for aiwork."""

from typing import Optional


class AIWorkError(Exception):
    """Base class for all aiwork errors."""


class ConfigurationError(AIWorkError):
    """Raised when provider or credential settings cannot be resolved."""


class UnsupportedProviderError(ConfigurationError):
    """Raised for a provider identifier outside the supported set."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class MissingCredentialError(ConfigurationError):
    """Raised when no API key is available for the selected provider."""

    def __init__(self, provider_name: str, env_key: str) -> None:
        self.env_key = env_key
        super().__init__(
            f"{provider_name} API key is required. Set {env_key} or use --api-key"
        )


class RetrievalError(AIWorkError):
    """Raised when commit history cannot be read from the repository."""


class ProviderError(AIWorkError):
    """Raised when a remote model service call fails."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        super().__init__(message)


class WebhookError(AIWorkError):
    """Raised when posting to a Slack webhook fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class WebhookValidationError(AIWorkError, ValueError):
    """Raised for a webhook URL that does not match the Slack pattern."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("Invalid Slack webhook URL format")
