"""Loader registry - dispatch of decoded feature records by kind tag."""

from collections.abc import Callable

import structlog

from .exceptions import UnknownFeatureKindError
from .feature import ProjectFeature
from .models import ProjectFeatureRecord
from .oauth_provider import OAUTH_PROVIDER_KIND, load_oauth_provider_settings

logger = structlog.get_logger()

FeatureLoader = Callable[[str, ProjectFeatureRecord], ProjectFeature]


class ProjectFeatureLoaderRegistry:
    """
    Registry of project feature loaders keyed by kind tag.

    Usage:
        # Register a loader
        ProjectFeatureLoaderRegistry.register("OAuthProvider", load_oauth_provider_settings)

        # Resolve the loader for a record
        loader = ProjectFeatureLoaderRegistry.get(record.type)
    """

    _loaders: dict[str, FeatureLoader] = {}

    @classmethod
    def register(cls, kind: str, loader: FeatureLoader) -> None:
        """
        Register a loader for a feature kind.

        Raises:
            ValueError: If a loader is already registered for ``kind``
        """
        if kind in cls._loaders:
            raise ValueError(f"Loader for kind '{kind}' is already registered")

        cls._loaders[kind] = loader
        logger.debug("Registered project feature loader", kind=kind)

    @classmethod
    def unregister(cls, kind: str) -> None:
        cls._loaders.pop(kind, None)

    @classmethod
    def is_registered(cls, kind: str) -> bool:
        return kind in cls._loaders

    @classmethod
    def available_kinds(cls) -> list[str]:
        return list(cls._loaders.keys())

    @classmethod
    def get(cls, kind: str) -> FeatureLoader:
        """
        Get the loader for a feature kind.

        Raises:
            UnknownFeatureKindError: If no loader is registered for ``kind``
        """
        if kind not in cls._loaders:
            raise UnknownFeatureKindError(kind, cls.available_kinds())
        return cls._loaders[kind]


def load_project_feature(project_id: str, record: ProjectFeatureRecord) -> ProjectFeature:
    """
    Load a feature of any registered kind.

    Errors raised by the kind's loader propagate unchanged.
    """
    loader = ProjectFeatureLoaderRegistry.get(record.type)
    return loader(project_id, record)


ProjectFeatureLoaderRegistry.register(OAUTH_PROVIDER_KIND, load_oauth_provider_settings)
