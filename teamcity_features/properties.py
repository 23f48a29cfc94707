"""Property bag used by the TeamCity REST API for feature configuration.

Every project feature, regardless of kind, is exchanged as a flat list of
name/value string pairs:

    {"count": 2, "property": [{"name": "displayName", "value": "GitHub"}, ...]}
"""

from collections.abc import Iterable, Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .exceptions import MalformedBooleanError

SECURE_PREFIX: Final = "secure:"
MASKED_VALUE: Final = "****"

_TRUE_LITERALS: Final = frozenset({"true", "True", "TRUE"})
_FALSE_LITERALS: Final = frozenset({"false", "False", "FALSE"})


def format_bool(value: bool) -> str:
    """Render a boolean as the literal token the REST API expects."""
    return "true" if value else "false"


def parse_bool(name: str, value: str) -> bool:
    """
    Parse a boolean literal read from property ``name``.

    Raises:
        MalformedBooleanError: If ``value`` is not a true/false literal
    """
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise MalformedBooleanError(name, value)


def is_secure(name: str) -> bool:
    """Check whether a property holds secret material."""
    return name.startswith(SECURE_PREFIX)


class Property(BaseModel):
    """A single name/value pair."""

    name: str = Field(..., description="Property key")
    value: str = Field(default="", description="Raw string value")


class Properties(BaseModel):
    """Ordered property bag."""

    entries: list[Property] = Field(default_factory=list, alias="property")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("entries", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        # The API omits or nulls the list for features without properties
        return [] if value is None else value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.entries)

    @classmethod
    def from_pairs(
        cls, pairs: Mapping[str, str] | Iterable[tuple[str, str]]
    ) -> "Properties":
        """Build a bag from ordered key/value pairs."""
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        return cls(entries=[Property(name=name, value=value) for name, value in pairs])

    def get(self, name: str, default: str | None = None) -> str | None:
        """
        Look up a property value.

        Returns the stored value (possibly an empty string) when ``name`` is
        present, otherwise ``default``. The last occurrence wins.
        """
        for prop in reversed(self.entries):
            if prop.name == name:
                return prop.value
        return default

    def names(self) -> list[str]:
        return [prop.name for prop in self.entries]

    def to_dict(self) -> dict[str, str]:
        return {prop.name: prop.value for prop in self.entries}

    def redacted(self) -> dict[str, str]:
        """Mapping view with every secure value masked, safe for logging."""
        return {
            prop.name: MASKED_VALUE if is_secure(prop.name) else prop.value
            for prop in self.entries
        }

    def __contains__(self, name: object) -> bool:
        return any(prop.name == name for prop in self.entries)

    def __len__(self) -> int:
        return len(self.entries)
