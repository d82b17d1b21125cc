"""Configuration management using Pydantic settings."""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROJECT_KEY = "default"


class ProjectConfig(BaseModel):
    """Notification settings for a single repository."""

    model_config = ConfigDict(frozen=True)

    repository_key: str = DEFAULT_PROJECT_KEY
    slack_channel: str
    display_name: str | None = None
    custom_deployment_url: str | None = None


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Required settings
    slack_bot_token: str = Field(
        ...,
        description="Slack bot token used for chat.postMessage",
    )

    # Optional settings
    github_webhook_secret: str | None = Field(
        default=None,
        description="Secret for validating GitHub webhook signatures. Unset disables validation.",
    )
    github_token: str | None = Field(
        default=None,
        description="GitHub token used when looking up commit messages",
    )
    projects: dict[str, ProjectConfig] = Field(
        default_factory=dict,
        description="Per-repository notification settings keyed by owner/repo",
    )
    default_slack_channel: str = Field(
        default="#prod-deployments",
        description="Channel used for repositories without their own entry",
    )
    http_timeout: float = Field(
        default=5.0,
        description="Timeout in seconds for outbound GitHub and Slack requests",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port")

    @model_validator(mode="after")
    def _key_projects(self) -> "Settings":
        projects = {
            key: project.model_copy(update={"repository_key": key})
            for key, project in self.projects.items()
        }
        projects.setdefault(
            DEFAULT_PROJECT_KEY,
            ProjectConfig(slack_channel=self.default_slack_channel),
        )
        self.projects = projects
        return self

    @property
    def signature_required(self) -> bool:
        """Whether inbound webhooks must carry a valid signature."""
        return bool(self.github_webhook_secret)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]
