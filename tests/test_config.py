"""
Tests for configuration management.
"""

import os
from datetime import timedelta
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from yoga_api.config import AppSettings, get_settings
from yoga_api.exceptions import ConfigurationError
from yoga_api.services import JWTService


class TestAppSettings:
    """Test application settings."""

    def test_test_environment_loaded(self):
        settings = get_settings()

        assert settings.environment == "testing"
        assert settings.database_url_computed == "sqlite://"
        assert settings.rate_limit_enabled is False

    def test_default_token_lifetime(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("JWT_EXPIRATION_HOURS", None)
            settings = AppSettings(_env_file=None)

        assert settings.jwt_expiration_hours == 24
        assert settings.jwt_lifetime == timedelta(hours=24)

    def test_environment_override(self):
        with patch.dict(
            os.environ,
            {
                "JWT_ALGORITHM": "HS512",
                "JWT_EXPIRATION_HOURS": "2",
                "CORS_ORIGINS": "http://a.example, http://b.example",
            },
        ):
            settings = AppSettings(_env_file=None)

        assert settings.jwt_algorithm == "HS512"
        assert settings.jwt_lifetime == timedelta(hours=2)
        assert settings.cors_origins_list == ["http://a.example", "http://b.example"]

    def test_database_url_from_parts(self):
        settings = AppSettings(
            _env_file=None,
            database_url=None,
            db_host="db",
            db_port=5433,
            db_name="studio",
            db_user="u",
            db_password="p",
        )

        assert settings.database_url_computed == "postgresql://u:p@db:5433/studio"

    def test_non_positive_lifetime_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, jwt_expiration_hours=0)

    def test_settings_are_frozen(self):
        settings = AppSettings(_env_file=None)

        with pytest.raises(ValidationError):
            settings.jwt_secret_key = "changed"


class TestJWTServiceFromSettings:
    def test_placeholder_secret_refused(self):
        settings = AppSettings(_env_file=None, jwt_secret_key="CHANGE_ME_IN_PRODUCTION")

        with pytest.raises(ConfigurationError):
            JWTService.from_settings(settings)

    def test_settings_are_applied(self):
        settings = AppSettings(
            _env_file=None,
            jwt_secret_key="a-perfectly-good-secret-0123456789",
            jwt_algorithm="HS384",
            jwt_expiration_hours=1,
        )

        service = JWTService.from_settings(settings)

        assert service.algorithm == "HS384"
        assert service.expires_in == 3600
