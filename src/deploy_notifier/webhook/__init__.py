"""Webhook handling for GitHub events."""

from deploy_notifier.webhook.handler import router
from deploy_notifier.webhook.validator import verify_github_signature

__all__ = ["router", "verify_github_signature"]
