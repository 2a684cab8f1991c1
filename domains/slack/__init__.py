"""Slack webhook delivery and slash-command request verification."""

from .sender import send_slack_message, notify_new_events, NotificationError
from .signature import verify_request

__all__ = [
    "send_slack_message",
    "notify_new_events",
    "NotificationError",
    "verify_request",
]
