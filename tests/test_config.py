"""
Tests for configuration management
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from storefront_cart.infrastructure.configuration.config import Settings, get_config, reset_config


class TestSettings:
    """Test Settings model"""

    def test_settings_default_values(self):
        """Defaults give an in-memory INR cart"""
        settings = Settings(_env_file=None)
        assert settings.environment == "test"  # from mock_env
        assert settings.log_level == "DEBUG"
        assert settings.currency == "INR"
        assert settings.cart_storage_key == "cart_v1"
        assert settings.storage_backend == "memory"
        assert settings.log_to_file is False

    def test_settings_from_environment(self):
        """Environment variables override defaults"""
        with patch.dict(
            os.environ,
            {
                "STORAGE_BACKEND": "FILE",
                "STORAGE_DIR": "/var/lib/carts",
                "CURRENCY": "usd",
                "CART_STORAGE_KEY": "cart_v2",
                "LOG_JSON": "true",
            },
        ):
            settings = Settings(_env_file=None)

        assert settings.storage_backend == "file"
        assert settings.storage_dir == "/var/lib/carts"
        assert settings.currency == "USD"
        assert settings.cart_storage_key == "cart_v2"
        assert settings.log_json is True

    def test_env_file_is_read(self, tmp_path):
        """Values can come from a .env file"""
        env_file = tmp_path / ".env"
        env_file.write_text("STORAGE_BACKEND=database\nDATABASE_URL=sqlite://\n", encoding="utf-8")

        settings = Settings(_env_file=env_file)

        assert settings.storage_backend == "database"
        assert settings.database_url == "sqlite://"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("storage_backend", "redis"),
            ("currency", "RUPEE"),
            ("cart_storage_key", "  "),
        ],
    )
    def test_settings_validation_error(self, field, value):
        """Invalid values are rejected"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})


class TestGetConfig:
    """Test the cached settings accessor"""

    def test_get_config_is_cached(self):
        """Repeated calls return the same instance"""
        assert get_config() is get_config()

    def test_reset_config_rereads_environment(self):
        """reset_config() drops the cached instance"""
        first = get_config()
        with patch.dict(os.environ, {"CURRENCY": "EUR"}):
            reset_config()
            second = get_config()

        assert second is not first
        assert second.currency == "EUR"
