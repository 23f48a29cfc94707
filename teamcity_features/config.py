"""Configuration for the TeamCity project features package."""

from dataclasses import dataclass

from .exceptions import TeamCityConfigError


@dataclass
class TeamCityConfig:
    """
    Location of the TeamCity REST API.

    Attributes:
        base_url: Server root URL (e.g., "https://teamcity.example.com")
        rest_path: Path of the REST API below the server root (default: "/app/rest")

    Example:
        ```python
        config = TeamCityConfig(base_url="https://teamcity.example.com")
        url = config.project_features_url("MyProject")
        ```
    """

    base_url: str = "http://localhost:8111"
    rest_path: str = "/app/rest"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.base_url = self.base_url.rstrip("/")
        self.rest_path = self.rest_path.rstrip("/")

        if not self.base_url:
            raise TeamCityConfigError("base_url is required")

        if self.rest_path and not self.rest_path.startswith("/"):
            raise TeamCityConfigError("rest_path must start with '/'")

    @property
    def api_url(self) -> str:
        return f"{self.base_url}{self.rest_path}"

    def project_features_url(self, project_id: str) -> str:
        """URL of the project features collection of a project."""
        return f"{self.api_url}/projects/id:{project_id}/projectFeatures"

    def project_feature_url(self, project_id: str, feature_id: str) -> str:
        """URL of a single project feature."""
        return f"{self.project_features_url(project_id)}/id:{feature_id}"
