"""Unit tests for infrastructure settings."""

import pytest
from pydantic import SecretStr, ValidationError

from infrastructure.settings import DatabaseSettings, SessionSettings, Settings


class TestDatabaseSettingsPoolConfiguration:
    """Tests for connection pool configuration."""

    def test_default_pool_settings(self):
        """Should have sensible pool defaults."""
        settings = DatabaseSettings()
        assert settings.pool_min_connections >= 1
        assert settings.pool_max_connections >= settings.pool_min_connections
        assert settings.pool_max_connections <= 20

    def test_pool_max_must_be_greater_than_or_equal_to_min(self):
        """Should validate max >= min."""
        with pytest.raises(ValidationError) as exc_info:
            DatabaseSettings(pool_min_connections=10, pool_max_connections=5)

        assert "pool_max_connections" in str(exc_info.value)

    def test_pool_max_equal_to_min_is_valid(self):
        settings = DatabaseSettings(pool_min_connections=5, pool_max_connections=5)
        assert settings.pool_max_connections == 5

    def test_pool_min_must_be_positive(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_min_connections=0)

    def test_pool_max_respects_upper_limit(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=101)


class TestDatabaseSettingsEnvironment:
    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("BULLETIN_DB_HOST", "db.internal")
        monkeypatch.setenv("BULLETIN_DB_PORT", "6543")

        settings = DatabaseSettings()

        assert settings.host == "db.internal"
        assert settings.port == 6543

    def test_connection_string_omits_password(self):
        settings = DatabaseSettings(password=SecretStr("hunter2"))

        assert "hunter2" not in settings.connection_string


class TestSessionSettings:
    def test_defaults(self):
        settings = SessionSettings()

        assert settings.cookie_name == "bulletin_session"
        assert settings.same_site == "lax"
        assert settings.https_only is False
        assert settings.uses_default_secret is True

    def test_custom_secret_is_not_default(self, monkeypatch):
        monkeypatch.setenv("BULLETIN_SESSION_SECRET_KEY", "a-real-secret")

        assert SessionSettings().uses_default_secret is False

    def test_rejects_unknown_same_site(self):
        with pytest.raises(ValidationError):
            SessionSettings(same_site="sometimes")

    def test_rejects_tiny_max_age(self):
        with pytest.raises(ValidationError):
            SessionSettings(max_age_seconds=1)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.app_name == "Bulletin API"
        assert settings.debug is False

    def test_sections_are_exposed(self):
        settings = Settings()

        assert isinstance(settings.database, DatabaseSettings)
        assert isinstance(settings.session, SessionSettings)
