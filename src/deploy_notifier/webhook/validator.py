"""GitHub webhook signature validation."""

import hashlib
import hmac
import logging

logger = logging.getLogger(__name__)


def verify_github_signature(payload: bytes, signature: str | None, secret: str | None) -> bool:
    """
    Verify a GitHub webhook signature using HMAC SHA-256.

    When no secret is configured every request is accepted. That mode exists
    for local development only.

    Args:
        payload: The raw request body bytes
        signature: The X-Hub-Signature-256 header value
        secret: The webhook secret configured in GitHub, if any

    Returns:
        True if the signature is valid or no secret is configured, False otherwise
    """
    if not secret:
        logger.warning("No webhook secret configured - accepting unsigned request")
        return True

    if not signature:
        logger.warning("Missing webhook signature")
        return False

    if not signature.startswith("sha256="):
        logger.warning("Invalid signature format - expected sha256= prefix")
        return False

    expected_signature = (
        "sha256="
        + hmac.new(
            secret.encode("utf-8"),
            payload,
            hashlib.sha256,
        ).hexdigest()
    )

    is_valid = hmac.compare_digest(expected_signature.encode("utf-8"), signature.encode("utf-8"))

    if not is_valid:
        logger.warning("Webhook signature validation failed")

    return is_valid
