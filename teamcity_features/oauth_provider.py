"""OAuth provider (connection) settings project feature.

Maps ``OauthProviderSettingsOptions`` to and from the property bag the
TeamCity REST API uses for features of kind ``OAuthProvider``.
"""

import structlog
from pydantic import BaseModel, Field

from .exceptions import MalformedBooleanError
from .feature import ProjectFeature
from .models import ProjectFeatureRecord
from .properties import Properties, format_bool, parse_bool

logger = structlog.get_logger()

OAUTH_PROVIDER_KIND = "OAuthProvider"

# Property keys, in the order they are sent to the API
DISPLAY_NAME = "displayName"
ENDPOINT = "endpoint"
FAIL_ON_ERROR = "fail-on-error"
NAMESPACE = "namespace"
VAULT_NAMESPACE = "vault-namespace"
PROVIDER_TYPE = "providerType"
ROLE_ID = "role-id"
SECRET_ID = "secure:secret-id"
URL = "url"

# Plain string options readable from the server, keyed by property name
_STRING_FIELDS = {
    DISPLAY_NAME: "display_name",
    ENDPOINT: "endpoint",
    NAMESPACE: "parameter_namespace",
    VAULT_NAMESPACE: "vault_namespace",
    PROVIDER_TYPE: "provider_type",
    ROLE_ID: "role_id",
    URL: "url",
}


class OauthProviderSettingsOptions(BaseModel):
    """Options of an OAuth provider connection."""

    display_name: str = Field(default="", description="Connection display name")
    endpoint: str = Field(default="", description="Provider endpoint URL")
    fail_on_error: bool = Field(
        default=False, description="Fail the build when the provider reports an error"
    )
    parameter_namespace: str = Field(default="", description="Parameter namespace")
    vault_namespace: str = Field(default="", description="Vault namespace")
    provider_type: str = Field(default="", description="Provider type, e.g. GitHub")
    role_id: str = Field(default="", description="AppRole role ID")
    secret_id: str = Field(
        default="", repr=False, description="AppRole secret ID (write-only)"
    )
    url: str = Field(default="", description="Provider URL")


class ProjectFeatureOauthProviderSettings(ProjectFeature):
    """OAuth provider settings feature of a project."""

    def __init__(
        self,
        project_id: str,
        options: OauthProviderSettingsOptions | None = None,
    ) -> None:
        super().__init__(project_id)
        self.options = options or OauthProviderSettingsOptions()

    @property
    def kind(self) -> str:
        return OAUTH_PROVIDER_KIND

    def properties(self) -> Properties:
        """All properties of the feature, secret included even when empty."""
        opts = self.options
        return Properties.from_pairs(
            [
                (DISPLAY_NAME, opts.display_name),
                (ENDPOINT, opts.endpoint),
                (FAIL_ON_ERROR, format_bool(opts.fail_on_error)),
                (NAMESPACE, opts.parameter_namespace),
                (VAULT_NAMESPACE, opts.vault_namespace),
                (PROVIDER_TYPE, opts.provider_type),
                (ROLE_ID, opts.role_id),
                (SECRET_ID, opts.secret_id),
                (URL, opts.url),
            ]
        )


def load_oauth_provider_settings(
    project_id: str, record: ProjectFeatureRecord
) -> ProjectFeature:
    """
    Rebuild OAuth provider settings from a feature read from the server.

    Absent string properties are left empty. The secret ID is never
    populated, since the server does not return secret values.

    Args:
        project_id: ID of the owning project
        record: Decoded feature record

    Returns:
        The loaded feature

    Raises:
        MalformedBooleanError: If ``fail-on-error`` is not a boolean literal
    """
    bag = record.properties
    values: dict[str, object] = {}

    for name, field_name in _STRING_FIELDS.items():
        value = bag.get(name)
        if value is not None:
            values[field_name] = value

    encoded = bag.get(FAIL_ON_ERROR)
    if encoded is not None:
        try:
            values["fail_on_error"] = parse_bool(FAIL_ON_ERROR, encoded)
        except MalformedBooleanError:
            logger.warning(
                "Malformed boolean in project feature",
                project_id=project_id,
                feature_id=record.id,
                property=FAIL_ON_ERROR,
            )
            raise

    options = OauthProviderSettingsOptions(**values)
    # Secret values are never echoed back by the server
    options.secret_id = ""

    settings = ProjectFeatureOauthProviderSettings(project_id, options)
    settings.id = record.id

    logger.debug(
        "Loaded project feature",
        project_id=project_id,
        feature_id=record.id,
        kind=OAUTH_PROVIDER_KIND,
        properties=bag.redacted(),
    )
    return settings
