"""Posting work reports to a Slack incoming webhook."""

import re
from typing import Any, Dict, List, Optional

import httpx
import structlog

from aiwork.errors import WebhookError, WebhookValidationError

logger = structlog.get_logger(__name__)

WEBHOOK_URL_PATTERN = re.compile(
    r"^https://hooks\.slack\.com/services/[A-Z0-9]+/[A-Z0-9]+/[a-zA-Z0-9]+$"
)
REPORT_TITLE = "📊 Work Report"
BLOCK_TEXT_LIMIT = 3000
MAX_BLOCKS = 50
FALLBACK_TEXT_LIMIT = 39000
REQUEST_TIMEOUT = 30.0


def validate_webhook_url(url: Optional[str]) -> bool:
    """Check that a URL has the shape of a Slack incoming webhook."""
    return bool(url) and WEBHOOK_URL_PATTERN.match(url.strip()) is not None


def chunk_text(text: str, limit: int = BLOCK_TEXT_LIMIT) -> List[str]:
    """Split text into chunks of at most ``limit`` characters on line boundaries.

    A single line longer than the limit is hard-split.
    """
    if not text:
        return [""]

    chunks: List[str] = []
    current: List[str] = []
    current_len = 0
    for line in text.split("\n"):
        while len(line) > limit:
            if current:
                chunks.append("\n".join(current))
                current, current_len = [], 0
            chunks.append(line[:limit])
            line = line[limit:]
        # +1 for the joining newline
        added = len(line) + (1 if current else 0)
        if current and current_len + added > limit:
            chunks.append("\n".join(current))
            current, current_len = [], 0
            added = len(line)
        current.append(line)
        current_len += added
    if current:
        chunks.append("\n".join(current))
    return chunks


def build_payload(
    report: str,
    author: Optional[str] = None,
    repo_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the Block Kit message for a report."""
    blocks: List[Dict[str, Any]] = [
        {"type": "header", "text": {"type": "plain_text", "text": REPORT_TITLE, "emoji": True}},
    ]

    context = []
    if author:
        context.append(f"*Author:* {author}")
    if repo_name:
        context.append(f"*Repository:* {repo_name}")
    if context:
        blocks.append(
            {"type": "context", "elements": [{"type": "mrkdwn", "text": " | ".join(context)}]}
        )
    blocks.append({"type": "divider"})

    max_sections = MAX_BLOCKS - len(blocks)
    # Slack rejects section blocks with empty text
    sections = [s for s in chunk_text(report) if s.strip()]
    if len(sections) > max_sections:
        sections = sections[: max_sections - 1] + ["[truncated]"]
    blocks.extend({"type": "section", "text": {"type": "mrkdwn", "text": s}} for s in sections)

    fallback = report
    if len(fallback) > FALLBACK_TEXT_LIMIT:
        fallback = fallback[: FALLBACK_TEXT_LIMIT - 100] + "\n\n[truncated]"
    return {"text": fallback, "blocks": blocks}


def send_to_slack(
    report: str,
    webhook_url: str,
    author: Optional[str] = None,
    repo_name: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> None:
    """Post a report to a Slack incoming webhook.

    Args:
        report: Report text
        webhook_url: Slack incoming webhook URL
        author: Author filter used for the report, shown as context
        repo_name: Repository the report covers, shown as context
        client: HTTP client to send with (a one-off request if None)

    Raises:
        WebhookValidationError: If the URL is not a Slack webhook URL
        WebhookError: If the request fails or Slack rejects it
    """
    if not validate_webhook_url(webhook_url):
        raise WebhookValidationError(webhook_url)

    payload = build_payload(report, author=author, repo_name=repo_name)
    url = webhook_url.strip()

    logger.debug("slack_post", blocks=len(payload["blocks"]))
    try:
        if client is not None:
            response = client.post(url, json=payload, timeout=REQUEST_TIMEOUT)
        else:
            response = httpx.post(url, json=payload, timeout=REQUEST_TIMEOUT)
    except httpx.HTTPError as e:
        raise WebhookError(f"Slack webhook request failed: {e}") from e

    if response.status_code >= 400:
        raise WebhookError(
            f"Slack webhook failed ({response.status_code}): {response.text}",
            status_code=response.status_code,
        )
