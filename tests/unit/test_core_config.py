"""Unit tests for Settings (pydantic-settings)."""

import pytest
from pydantic import ValidationError

from devmatch.core.config import Settings
from devmatch.core.enums import Environment


def _settings(**overrides) -> Settings:
    values = {"database_url": "sqlite+aiosqlite:///:memory:", **overrides}
    return Settings(_env_file=None, **values)


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = _settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.app_name == "DevMatch"
        assert settings.db_pool_size == 20
        assert settings.is_development
        assert not settings.is_production

    def test_reads_environment_variables(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("DB_POOL_SIZE", "5")
        monkeypatch.setenv("DB_ECHO", "true")

        settings = _settings()

        assert settings.is_production
        assert settings.db_pool_size == 5
        assert settings.db_echo is True

    def test_log_level_is_normalized(self):
        assert _settings(log_level=" warning ").log_level == "WARNING"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            _settings(log_level="VERBOSE")

    def test_pool_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            _settings(db_pool_size=0)

    def test_database_url_is_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    @pytest.mark.parametrize(
        ("environment", "uses_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_json_logs_outside_development(self, environment, uses_json):
        assert environment.uses_json_logs is uses_json
