"""Common capability set shared by every project feature kind."""

from abc import ABC, abstractmethod

from .properties import Properties


class ProjectFeature(ABC):
    """
    A typed configuration block attached to a TeamCity project.

    Concrete kinds hold their own options and know how to render them as a
    property bag. Identifier and parent are bookkeeping owned by the caller:
    ``id`` is empty until the server assigns one on create.
    """

    def __init__(self, project_id: str, feature_id: str = "") -> None:
        self._id = feature_id
        self._project_id = project_id

    @property
    def id(self) -> str:
        """ID of this project feature, empty until assigned by the server."""
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._id = value

    @property
    def project_id(self) -> str:
        """ID of the project the feature is assigned to."""
        return self._project_id

    @project_id.setter
    def project_id(self, value: str) -> None:
        self._project_id = value

    @property
    @abstractmethod
    def kind(self) -> str:
        """Kind tag identifying the feature type on the server."""

    @abstractmethod
    def properties(self) -> Properties:
        """Render the feature options as a property bag."""

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(id={self._id!r}, "
            f"project_id={self._project_id!r}, kind={self.kind!r})"
        )
