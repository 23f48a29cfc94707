"""Tests for ProjectFeatureRecord."""

import pytest
from pydantic import ValidationError

from teamcity_features import (
    OauthProviderSettingsOptions,
    ProjectFeatureOauthProviderSettings,
    ProjectFeatureRecord,
)


class TestProjectFeatureRecord:
    """Tests for decoding and building feature records."""

    def test_from_payload_ignores_extra_keys(self):
        record = ProjectFeatureRecord.from_payload(
            {
                "id": "PROJECT_EXT_7",
                "type": "OAuthProvider",
                "href": "/app/rest/projects/id:MyProject/projectFeatures/id:PROJECT_EXT_7",
                "properties": {
                    "count": 1,
                    "property": [{"name": "displayName", "value": "GH"}],
                },
            }
        )
        assert record.id == "PROJECT_EXT_7"
        assert record.type == "OAuthProvider"
        assert record.properties.get("displayName") == "GH"

    def test_from_payload_requires_type(self):
        with pytest.raises(ValidationError):
            ProjectFeatureRecord.from_payload({"id": "PROJECT_EXT_7"})

    def test_from_payload_without_properties(self):
        record = ProjectFeatureRecord.from_payload({"id": "X", "type": "OAuthProvider"})
        assert len(record.properties) == 0

    def test_create_payload_omits_id(self, github_feature):
        """Test that a feature without ID produces a create payload."""
        payload = ProjectFeatureRecord.from_feature(github_feature).to_payload()

        assert "id" not in payload
        assert payload["type"] == "OAuthProvider"
        assert payload["properties"]["count"] == 9
        assert payload["properties"]["property"][0] == {
            "name": "displayName",
            "value": "GH",
        }

    def test_update_payload_includes_id(self, github_feature):
        github_feature.id = "PROJECT_EXT_8"

        payload = ProjectFeatureRecord.from_feature(github_feature).to_payload()

        assert payload["id"] == "PROJECT_EXT_8"

    def test_payload_reloads(self):
        feature = ProjectFeatureOauthProviderSettings(
            "MyProject", OauthProviderSettingsOptions(display_name="GH", fail_on_error=True)
        )
        feature.id = "PROJECT_EXT_9"
        payload = ProjectFeatureRecord.from_feature(feature).to_payload()

        record = ProjectFeatureRecord.from_payload(payload)

        assert record.id == "PROJECT_EXT_9"
        assert record.properties == feature.properties()
