"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values
- Settings loading from environment variables
- Environment detection
- Validation (URLs, market data adapter, staleness window)
- Cached singleton behavior
"""

import os
from decimal import Decimal
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from mintlite.core.config import Settings, get_settings
from mintlite.core.enums import Environment


def _settings(**env: str) -> Settings:
    with patch.dict(os.environ, env, clear=True):
        return Settings(_env_file=None)


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test default values."""

    def test_defaults(self):
        settings = _settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.market_data_provider == "http"
        assert settings.price_staleness_minutes == 15
        assert settings.market_data_static_quotes == {}
        assert settings.market_data_api_key is None
        assert settings.db_create_tables is False


class TestSettingsFromEnvironment:
    """Test loading from environment variables."""

    def test_reads_environment_variables(self):
        settings = _settings(
            ENVIRONMENT="production",
            DATABASE_URL="postgresql+asyncpg://u:p@db:5432/app",
            MARKET_DATA_API_KEY="secret",
            MARKET_DATA_TIMEOUT="2.5",
            PRICE_STALENESS_MINUTES="60",
        )

        assert settings.environment == Environment.PRODUCTION
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/app"
        assert settings.market_data_api_key == "secret"
        assert settings.market_data_timeout == 2.5
        assert settings.price_staleness_minutes == 60

    def test_static_quotes_parsed_from_json(self):
        settings = _settings(
            MARKET_DATA_STATIC_QUOTES='{"MSFT": "310.00", "GOOGL": "2850.00"}'
        )

        assert settings.market_data_static_quotes == {
            "MSFT": Decimal("310.00"),
            "GOOGL": Decimal("2850.00"),
        }


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_urls_lose_trailing_slash(self):
        settings = _settings(
            API_BASE_URL="https://api.example.com/",
            MARKET_DATA_BASE_URL="https://quotes.example.com//",
        )

        assert settings.api_base_url == "https://api.example.com"
        assert settings.market_data_base_url == "https://quotes.example.com"

    def test_market_data_provider_normalized(self):
        assert _settings(MARKET_DATA_PROVIDER=" Static ").market_data_provider == "static"

    def test_market_data_provider_rejects_unknown(self):
        with pytest.raises(ValidationError, match="Unsupported market data provider"):
            _settings(MARKET_DATA_PROVIDER="bloomberg")

    @pytest.mark.parametrize("minutes", ["0", "-5"])
    def test_staleness_must_be_positive(self, minutes):
        with pytest.raises(ValidationError, match="must be positive"):
            _settings(PRICE_STALENESS_MINUTES=minutes)


class TestEnvironmentProperties:
    """Test environment detection helpers."""

    def test_development(self):
        assert _settings(ENVIRONMENT="development").is_development is True

    @pytest.mark.parametrize("environment", ["testing", "ci", "production"])
    def test_not_development(self, environment):
        assert _settings(ENVIRONMENT=environment).is_development is False


class TestGetSettings:
    """Test cached singleton."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
