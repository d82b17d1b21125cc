"""Slack message formatting for deployment events."""

from dataclasses import dataclass, field
from typing import Any

from deploy_notifier.config import ProjectConfig
from deploy_notifier.events import DeploymentEvent

ENVIRONMENT_EMOJI = {
    "Production": "🚀",
    "Preview": "🔍",
    "Staging": "🧪",
    "Development": "🛠️",
}
DEFAULT_SUCCESS_EMOJI = "✅"
FAILURE_EMOJI = "⚠️"
FAILURE_NOTICE = "❗ *Check your deployment dashboard for error details.*"


@dataclass(frozen=True)
class ActionLink:
    """A button linking out of the notification."""

    label: str
    url: str
    is_primary: bool = False

    def to_block_element(self) -> dict[str, Any]:
        element: dict[str, Any] = {
            "type": "button",
            "text": {
                "type": "plain_text",
                "text": self.label,
                "emoji": True,
            },
            "url": self.url,
        }
        if self.is_primary:
            element["style"] = "primary"
        return element


@dataclass(frozen=True)
class NotificationMessage:
    """A formatted deployment notification."""

    header_text: str
    body_text: str
    actions: tuple[ActionLink, ...] = field(default_factory=tuple)

    def to_blocks(self) -> list[dict[str, Any]]:
        """Render the message as Slack Block Kit blocks."""
        blocks: list[dict[str, Any]] = [
            {
                "type": "header",
                "text": {
                    "type": "plain_text",
                    "text": self.header_text,
                    "emoji": True,
                },
            },
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": self.body_text,
                },
            },
        ]

        if self.actions:
            blocks.append(
                {
                    "type": "actions",
                    "elements": [action.to_block_element() for action in self.actions],
                }
            )

        return blocks


def environment_emoji(environment: str, is_success: bool) -> str:
    """Pick the header emoji for a deployment outcome."""
    if not is_success:
        return FAILURE_EMOJI
    return ENVIRONMENT_EMOJI.get(environment, DEFAULT_SUCCESS_EMOJI)


def build_notification(
    event: DeploymentEvent,
    project: ProjectConfig,
    commit_message: str | None,
) -> NotificationMessage:
    """
    Build the notification for a finished deployment.

    Args:
        event: The parsed deployment event
        project: Settings resolved for the event's repository
        commit_message: Commit message text, if one was fetched

    Returns:
        NotificationMessage ready for dispatch
    """
    emoji = environment_emoji(event.environment, event.is_success)
    status = "Successful" if event.is_success else "Failed"

    lines = [
        f"*Project:* {project.display_name or event.repository_name}",
        f"*Environment:* {event.environment}",
        f"*Author:* {event.author_login}",
        f"*Commit:* `{event.short_sha}`",
    ]
    if not event.is_success:
        lines.append("")
        lines.append(FAILURE_NOTICE)
    elif commit_message:
        lines.append(f"*Message:* {commit_message}")

    actions: list[ActionLink] = []
    deployment_url = project.custom_deployment_url or event.target_url
    if event.is_success and deployment_url:
        actions.append(ActionLink("🌐 View Deployment", deployment_url, is_primary=True))
    actions.append(ActionLink("📝 View Commit", event.commit_url))

    return NotificationMessage(
        header_text=f"{emoji} {event.environment} Deployment {status}",
        body_text="\n".join(lines),
        actions=tuple(actions),
    )
