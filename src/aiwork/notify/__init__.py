"""Report delivery to messaging services."""

from aiwork.notify.slack import send_to_slack, validate_webhook_url

__all__ = ["send_to_slack", "validate_webhook_url"]
