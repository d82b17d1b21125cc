"""Commit metadata lookup via the GitHub REST API."""

import logging

import httpx

from deploy_notifier.config import get_settings

logger = logging.getLogger(__name__)

COMMIT_MESSAGE_PLACEHOLDER = "Unable to fetch commit message"
MAX_COMMIT_MESSAGE_LENGTH = 100


async def fetch_commit_message(repo_full_name: str, commit_sha: str) -> str:
    """
    Fetch the message of a commit.

    Never raises: any failure yields COMMIT_MESSAGE_PLACEHOLDER so that a
    missing message does not hold up the notification.

    Args:
        repo_full_name: Repository in owner/repo format
        commit_sha: Full commit SHA

    Returns:
        The commit message truncated to 100 characters, or the placeholder
    """
    settings = get_settings()
    url = f"https://api.github.com/repos/{repo_full_name}/commits/{commit_sha}"
    headers = {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": "deployment-notifier",
    }
    if settings.github_token:
        headers["Authorization"] = f"Bearer {settings.github_token}"

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        try:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            message = response.json()["commit"]["message"]
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Failed to fetch commit {commit_sha} from {repo_full_name}: {e}")
            return COMMIT_MESSAGE_PLACEHOLDER
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Unexpected commit response for {repo_full_name}@{commit_sha}: {e!r}")
            return COMMIT_MESSAGE_PLACEHOLDER

    if not isinstance(message, str):
        logger.warning(f"Commit message for {repo_full_name}@{commit_sha} is not a string")
        return COMMIT_MESSAGE_PLACEHOLDER

    return message[:MAX_COMMIT_MESSAGE_LENGTH]
