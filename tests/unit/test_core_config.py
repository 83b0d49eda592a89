"""Unit tests for Settings.

Tests cover:
- Environment variable loading and defaults
- URL trailing slash normalization
- Timeout validation
- Environment convenience properties
"""

import pytest
from pydantic import ValidationError

from testapi.core.config import Settings, get_settings
from testapi.core.constants import USER_API_TIMEOUT_DEFAULT
from testapi.core.enums import Environment


@pytest.mark.unit
class TestSettingsLoading:
    """Test settings load from the environment."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("USER_API_TIMEOUT", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.user_api_timeout == USER_API_TIMEOUT_DEFAULT
        assert settings.bookings_api_url is None

    def test_reads_environment_variables(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "ci")
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/t")
        monkeypatch.setenv("USER_API_URL", "https://user-api.test")

        settings = Settings()

        assert settings.is_ci
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/t"
        assert settings.user_api_url == "https://user-api.test"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestSettingsValidation:
    """Test field validators."""

    def test_trailing_slash_removed(self):
        settings = Settings(
            api_base_url="https://testapi.test/",
            user_api_url="https://user-api.test///",
        )

        assert settings.api_base_url == "https://testapi.test"
        assert settings.user_api_url == "https://user-api.test"

    def test_optional_url_stays_none(self):
        assert Settings(video_api_url=None).video_api_url is None

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout_rejected(self, timeout):
        with pytest.raises(ValidationError, match="user_api_timeout must be positive"):
            Settings(user_api_timeout=timeout)

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(environment="staging")


@pytest.mark.unit
class TestEnvironmentProperties:
    """Test is_* helpers."""

    @pytest.mark.parametrize(
        ("environment", "attribute"),
        [
            (Environment.DEVELOPMENT, "is_development"),
            (Environment.TESTING, "is_testing"),
            (Environment.CI, "is_ci"),
            (Environment.PRODUCTION, "is_production"),
        ],
    )
    def test_exactly_one_property_true(self, environment, attribute):
        settings = Settings(environment=environment)

        flags = {
            name: getattr(settings, name)
            for name in ("is_development", "is_testing", "is_ci", "is_production")
        }
        assert flags.pop(attribute) is True
        assert not any(flags.values())
