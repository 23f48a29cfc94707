"""Pytest configuration for project feature tests."""

import pytest

from teamcity_features import (
    OauthProviderSettingsOptions,
    ProjectFeatureOauthProviderSettings,
)


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def github_options():
    """Options of a GitHub connection, secret included."""
    return OauthProviderSettingsOptions(
        display_name="GH",
        endpoint="https://x",
        fail_on_error=True,
        provider_type="GitHub",
        role_id="r1",
        secret_id="shh",
        url="https://y",
    )


@pytest.fixture
def vault_options():
    """Options of a HashiCorp Vault connection without a secret."""
    return OauthProviderSettingsOptions(
        display_name="Vault",
        endpoint="https://vault.example.com",
        fail_on_error=False,
        parameter_namespace="team-a",
        vault_namespace="admin/ci",
        provider_type="teamcity-vault",
        role_id="role-123",
        url="https://vault.example.com:8200",
    )


@pytest.fixture
def github_feature(github_options):
    """A declared, not yet created, GitHub connection feature."""
    return ProjectFeatureOauthProviderSettings("MyProject", github_options)
