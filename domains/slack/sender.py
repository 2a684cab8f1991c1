"""Slack incoming-webhook delivery. Failures are raised, never retried."""

from datetime import datetime

import httpx

import config
from logger import logger
from utils.log_sanitizer import sanitize_for_log
from .blocks import build_new_events_message


class NotificationError(Exception):
    """Raised when Slack did not accept a message."""


async def send_slack_message(
    text: str,
    blocks: list[dict] | None = None,
    webhook_url: str | None = None
) -> None:
    """Post a message to the Slack webhook.

    Args:
        text: Fallback text (shown in notifications and by clients without blocks)
        blocks: Optional Block Kit blocks
        webhook_url: Override for SLACK_WEBHOOK_URL

    Raises:
        NotificationError: If the webhook is unset, unreachable or returns non-2xx
    """
    webhook_url = webhook_url or config.SLACK_WEBHOOK_URL
    if not webhook_url:
        raise NotificationError("SLACK_WEBHOOK_URL is not configured")

    payload = {"text": text}
    if blocks:
        payload["blocks"] = blocks

    try:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                webhook_url,
                json=payload,
                timeout=config.HTTP_TIMEOUT
            )
    except httpx.HTTPError as e:
        raise NotificationError(f"Slack webhook unreachable: {sanitize_for_log(str(e))}") from e

    if not response.is_success:
        raise NotificationError(f"Slack API error: {response.status_code} {sanitize_for_log(response.text)}")

    logger.debug(f"Posted Slack message ({len(text)} chars, {len(blocks or [])} blocks)")


async def notify_new_events(events: list[dict], now: datetime = None) -> None:
    """Announce newly published events in a single message.

    Raises:
        NotificationError: If delivery fails
    """
    text, blocks = build_new_events_message(events, now)
    await send_slack_message(text, blocks)
    logger.info(f"Notified Slack about {len(events)} new event(s)")
