"""GitHub deployment status webhook handler."""

import logging
from typing import Any

from fastapi import APIRouter, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from deploy_notifier.config import get_settings
from deploy_notifier.events import NOTIFIABLE_STATES, DeploymentEvent
from deploy_notifier.github import fetch_commit_message
from deploy_notifier.notifications import build_notification, post_message
from deploy_notifier.projects import ProjectRegistry
from deploy_notifier.webhook.validator import verify_github_signature

logger = logging.getLogger(__name__)
router = APIRouter()


async def notify_deployment(event: DeploymentEvent, projects: ProjectRegistry) -> None:
    """Resolve, annotate, format and dispatch the notification for one event."""
    project = projects.resolve(event.repository_full_name)
    commit_message = await fetch_commit_message(event.repository_full_name, event.commit_sha)
    message = build_notification(event, project, commit_message)

    result = await post_message(project.slack_channel, message)
    if result.ok:
        logger.info(
            f"Sent {event.state} notification for {event.repository_full_name} "
            f"to {project.slack_channel}"
        )
    else:
        logger.error(
            f"Notification for {event.repository_full_name} was not delivered: {result.error}"
        )


@router.post("/webhook")
async def github_webhook(
    request: Request,
    x_hub_signature_256: str | None = Header(None),
) -> Any:
    """
    Handle incoming GitHub webhooks.

    Validates the signature, ignores everything except finished deployment
    statuses and posts a Slack notification for the rest.
    """
    settings = get_settings()

    # Read raw body for signature validation
    body = await request.body()

    if not verify_github_signature(body, x_hub_signature_256, settings.github_webhook_secret):
        raise HTTPException(status_code=401, detail="Invalid signature")

    try:
        payload = await request.json()

        # Deliveries may include other event types
        status = payload.get("deployment_status")
        if status is None:
            logger.debug("Ignoring payload without deployment_status")
            return {"message": "Not a deployment status event"}

        state = status.get("state")
        if state not in NOTIFIABLE_STATES:
            logger.debug(f"Ignoring deployment state: {state}")
            return {"message": f"Ignoring deployment state: {state}"}

        event = DeploymentEvent.from_payload(payload)
        await notify_deployment(event, request.app.state.projects)

        return {
            "message": "Notification sent successfully",
            "project": event.repository_full_name,
            "environment": event.environment,
            "state": event.state,
        }

    except Exception as e:
        logger.exception(f"Webhook handler error: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "details": str(e)},
        )
