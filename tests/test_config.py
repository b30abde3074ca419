"""
Tests for application settings
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from starwars.config import GRAPHQL_ENDPOINT, Settings


class TestSettings:
    def test_defaults(self, settings):
        assert settings.graphql_path == GRAPHQL_ENDPOINT
        assert settings.graphiql_enabled is True
        assert settings.playground_enabled is True
        assert settings.subscriptions_enabled is True
        assert settings.inject_test_identity is False
        assert settings.api_port == 5000
        assert settings.auth_provider == "none"

    @patch.dict(
        os.environ,
        {
            "STARWARS_GRAPHQL_PATH": "/api/graphql",
            "STARWARS_INJECT_TEST_IDENTITY": "true",
            "STARWARS_TEST_IDENTITY_COUNTRY": "ca",
        },
    )
    def test_reads_prefixed_environment(self):
        settings = Settings(_env_file=None)
        assert settings.graphql_path == "/api/graphql"
        assert settings.inject_test_identity is True
        assert settings.test_identity_country == "ca"

    def test_trailing_slash_is_stripped(self):
        settings = Settings(_env_file=None, graphql_path="/graphql/")
        assert settings.graphql_path == "/graphql"
        assert settings.playground_path == "/graphql/playground"

    @pytest.mark.parametrize("path", ["graphql", "/", ""])
    def test_invalid_graphql_path(self, path):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, graphql_path=path)

    @pytest.mark.parametrize(
        "environment,expected",
        [("production", True), ("PROD", True), ("development", False), ("staging", False)],
    )
    def test_is_production(self, environment, expected):
        assert Settings(_env_file=None, environment=environment).is_production is expected
