"""Wire models for project features exchanged with the TeamCity REST API."""

from typing import Any

from pydantic import BaseModel, Field

from .feature import ProjectFeature
from .properties import Properties


class ProjectFeatureRecord(BaseModel):
    """
    A project feature as decoded from, or sent to, the REST API.

    Example payload:
        ```json
        {
            "id": "PROJECT_EXT_12",
            "type": "OAuthProvider",
            "properties": {
                "count": 1,
                "property": [{"name": "displayName", "value": "GitHub"}]
            }
        }
        ```
    """

    id: str = Field(default="", description="Feature ID assigned by the server")
    type: str = Field(..., description="Feature kind tag")
    properties: Properties = Field(default_factory=Properties)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "ProjectFeatureRecord":
        """Validate a decoded JSON object returned by the API."""
        return cls.model_validate(data)

    @classmethod
    def from_feature(cls, feature: ProjectFeature) -> "ProjectFeatureRecord":
        """Build the record sent to the API for create and update calls."""
        return cls(id=feature.id, type=feature.kind, properties=feature.properties())

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict; ``id`` is left out until the server assigned one."""
        return self.model_dump(by_alias=True, exclude={"id"} if not self.id else None)
