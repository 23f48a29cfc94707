"""
teamcity-project-features - Project feature settings for the TeamCity REST API.

Translates typed feature options to and from the flat property bag the
TeamCity REST API uses for project features.

Example:
    ```python
    from teamcity_features import (
        OauthProviderSettingsOptions,
        ProjectFeatureOauthProviderSettings,
        ProjectFeatureRecord,
        load_project_feature,
    )

    # Declare a feature and build the create payload
    feature = ProjectFeatureOauthProviderSettings(
        "MyProject",
        OauthProviderSettingsOptions(display_name="GitHub", provider_type="GitHub"),
    )
    payload = ProjectFeatureRecord.from_feature(feature).to_payload()

    # Load a feature from an API response
    record = ProjectFeatureRecord.from_payload(response_json)
    feature = load_project_feature("MyProject", record)
    ```
"""

from .config import TeamCityConfig
from .exceptions import (
    MalformedBooleanError,
    TeamCityConfigError,
    TeamCityFeatureError,
    UnknownFeatureKindError,
)
from .feature import ProjectFeature
from .models import ProjectFeatureRecord
from .oauth_provider import (
    OAUTH_PROVIDER_KIND,
    OauthProviderSettingsOptions,
    ProjectFeatureOauthProviderSettings,
    load_oauth_provider_settings,
)
from .properties import Properties, Property, format_bool, parse_bool
from .registry import ProjectFeatureLoaderRegistry, load_project_feature

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "TeamCityConfig",
    # Exceptions
    "TeamCityFeatureError",
    "TeamCityConfigError",
    "MalformedBooleanError",
    "UnknownFeatureKindError",
    # Property bag
    "Property",
    "Properties",
    "format_bool",
    "parse_bool",
    # Features
    "ProjectFeature",
    "ProjectFeatureRecord",
    "ProjectFeatureLoaderRegistry",
    "load_project_feature",
    # OAuth provider settings
    "OAUTH_PROVIDER_KIND",
    "OauthProviderSettingsOptions",
    "ProjectFeatureOauthProviderSettings",
    "load_oauth_provider_settings",
]
