"""Notification formatting and delivery."""

from deploy_notifier.notifications.formatter import (
    ActionLink,
    NotificationMessage,
    build_notification,
)
from deploy_notifier.notifications.slack import SlackResult, post_message

__all__ = [
    "ActionLink",
    "NotificationMessage",
    "SlackResult",
    "build_notification",
    "post_message",
]
