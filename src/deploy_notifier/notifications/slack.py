"""Slack notification delivery."""

import logging
from dataclasses import dataclass

import httpx

from deploy_notifier.config import get_settings
from deploy_notifier.notifications.formatter import NotificationMessage

logger = logging.getLogger(__name__)

SLACK_POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"


@dataclass(frozen=True)
class SlackResult:
    """Outcome of a chat.postMessage call."""

    ok: bool
    error: str | None = None


async def post_message(channel: str, message: NotificationMessage) -> SlackResult:
    """
    Post a notification to a Slack channel.

    Delivery is best-effort: failures are logged and reported in the result,
    never raised or retried.

    Args:
        channel: Channel name or ID
        message: The formatted notification

    Returns:
        SlackResult describing whether Slack accepted the message
    """
    settings = get_settings()

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        try:
            response = await client.post(
                SLACK_POST_MESSAGE_URL,
                headers={"Authorization": f"Bearer {settings.slack_bot_token}"},
                json={
                    "channel": channel,
                    "blocks": message.to_blocks(),
                },
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Failed to send Slack notification to {channel}: {e}")
            return SlackResult(ok=False, error=str(e))
        except ValueError as e:
            logger.error(f"Invalid response from Slack for {channel}: {e}")
            return SlackResult(ok=False, error="invalid_response")

    if not isinstance(body, dict):
        logger.error(f"Unexpected response body from Slack for {channel}: {body!r}")
        return SlackResult(ok=False, error="invalid_response")

    if not body.get("ok"):
        error = body.get("error", "unknown_error")
        logger.error(f"Slack rejected notification to {channel}: {error}")
        return SlackResult(ok=False, error=error)

    logger.info(f"Slack notification sent to {channel}")
    return SlackResult(ok=True)
