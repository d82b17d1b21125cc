"""Repository to notification settings lookup."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from deploy_notifier.config import DEFAULT_PROJECT_KEY, ProjectConfig, Settings


class ProjectRegistry(Mapping[str, ProjectConfig]):
    """
    Read-only table of project settings.

    Built once at startup and shared by every request. Lookups for unknown
    repositories fall back to the ``default`` entry, so resolution never fails.
    """

    def __init__(self, projects: Mapping[str, ProjectConfig]) -> None:
        if DEFAULT_PROJECT_KEY not in projects:
            raise ValueError(f"Project table must contain a '{DEFAULT_PROJECT_KEY}' entry")
        self._projects = MappingProxyType(dict(projects))

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProjectRegistry":
        return cls(settings.projects)

    @property
    def default(self) -> ProjectConfig:
        return self._projects[DEFAULT_PROJECT_KEY]

    def resolve(self, repo_full_name: str) -> ProjectConfig:
        """Return the settings for a repository, or the default entry."""
        return self._projects.get(repo_full_name, self.default)

    def __getitem__(self, key: str) -> ProjectConfig:
        return self._projects[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._projects)

    def __len__(self) -> int:
        return len(self._projects)
