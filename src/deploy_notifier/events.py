"""Deployment status event parsing."""

from dataclasses import dataclass
from typing import Any

NOTIFIABLE_STATES = ("success", "failure")


@dataclass(frozen=True)
class DeploymentEvent:
    """The parts of a deployment_status payload used for notifications."""

    repository_full_name: str
    repository_name: str
    environment: str
    state: str
    commit_sha: str
    author_login: str
    target_url: str | None = None

    @property
    def is_success(self) -> bool:
        return self.state == "success"

    @property
    def short_sha(self) -> str:
        return self.commit_sha[:7]

    @property
    def commit_url(self) -> str:
        return f"https://github.com/{self.repository_full_name}/commit/{self.commit_sha}"

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "DeploymentEvent":
        """
        Build an event from a deployment_status webhook payload.

        Raises:
            KeyError: If a required field is missing from the payload
        """
        status = payload["deployment_status"]
        deployment = payload["deployment"]
        repository = payload["repository"]

        full_name = repository["full_name"]
        return cls(
            repository_full_name=full_name,
            repository_name=repository.get("name") or full_name.rsplit("/", 1)[-1],
            environment=status.get("environment") or deployment["environment"],
            state=status["state"],
            commit_sha=deployment["sha"],
            author_login=deployment["creator"]["login"],
            target_url=status.get("target_url") or status.get("environment_url"),
        )
