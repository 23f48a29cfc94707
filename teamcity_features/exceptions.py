"""
TeamCity project feature exceptions.

Standalone exception hierarchy for the teamcity_features package.
"""

from typing import Any


class TeamCityFeatureError(Exception):
    """Base exception for all project feature errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details})"


class TeamCityConfigError(TeamCityFeatureError):
    """Invalid client configuration."""

    pass


class MalformedBooleanError(TeamCityFeatureError):
    """A property value is not a recognized boolean literal."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(
            f"property '{name}' has malformed boolean value {value!r}",
            details={"property": name, "value": value},
        )


class UnknownFeatureKindError(TeamCityFeatureError):
    """No loader is registered for a project feature kind."""

    def __init__(self, kind: str, available: list[str] | None = None):
        self.kind = kind
        available = available or []
        super().__init__(
            f"Project feature kind '{kind}' not found. "
            f"Available kinds: {', '.join(available) or 'none'}",
            details={"kind": kind, "available": available},
        )
