"""GitHub API interactions."""

from deploy_notifier.github.commits import COMMIT_MESSAGE_PLACEHOLDER, fetch_commit_message

__all__ = ["COMMIT_MESSAGE_PLACEHOLDER", "fetch_commit_message"]
