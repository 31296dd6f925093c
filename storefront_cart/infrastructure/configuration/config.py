"""
Configuration management for the storefront cart
"""

import threading
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront_cart.infrastructure.utilities.constants import CartSettings, StorageBackends


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    environment: str = Field("development", description="development, test or production")
    log_level: str = Field("INFO")
    log_dir: str = Field("logs")
    log_to_file: bool = Field(False)
    log_json: bool = Field(False)

    # Cart settings
    currency: str = Field(CartSettings.DEFAULT_CURRENCY)
    cart_storage_key: str = Field(CartSettings.STORAGE_KEY)

    # Storage settings
    storage_backend: str = Field(StorageBackends.MEMORY)
    storage_dir: str = Field("data/carts")
    database_url: str = Field("sqlite:///data/storefront_cart.db")

    @field_validator("storage_backend")
    @classmethod
    def _check_backend(cls, value: str) -> str:
        value = value.lower()
        if value not in StorageBackends.ALL:
            raise ValueError(f"storage_backend must be one of {', '.join(StorageBackends.ALL)}")
        return value

    @field_validator("currency")
    @classmethod
    def _check_currency(cls, value: str) -> str:
        if len(value) != 3:
            raise ValueError("Currency must be a 3-letter code")
        return value.upper()

    @field_validator("cart_storage_key")
    @classmethod
    def _check_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("cart_storage_key cannot be empty")
        return value


_settings_instance: Optional[Settings] = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next get_config() re-reads the environment"""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
