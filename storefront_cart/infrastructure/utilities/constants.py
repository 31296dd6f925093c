"""
Application constants for the storefront cart

Centralizes magic numbers and hard-coded strings.
"""

from typing import Final


class CartSettings:
    """Cart persistence defaults"""

    STORAGE_KEY: Final[str] = "cart_v1"
    USER_KEY_SEPARATOR: Final[str] = ":"
    PAYLOAD_VERSION: Final[int] = 1
    DEFAULT_CURRENCY: Final[str] = "INR"


class StorageBackends:
    """Names accepted by the storage_backend setting"""

    MEMORY: Final[str] = "memory"
    FILE: Final[str] = "file"
    DATABASE: Final[str] = "database"

    ALL: Final[tuple] = (MEMORY, FILE, DATABASE)


class LoggingSettings:
    """Logging file sizes and rotation settings"""

    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    MAIN_LOG_BACKUP_COUNT: Final[int] = 5
    ERROR_LOG_BACKUP_COUNT: Final[int] = 5
    SLOW_OPERATION_THRESHOLD_MS: Final[int] = 50


class FileSettings:
    """File names used by the infrastructure layer"""

    MAIN_LOG_FILE: Final[str] = "storefront_cart.log"
    ERROR_LOG_FILE: Final[str] = "errors.log"
    JSON_LOG_FILE: Final[str] = "storefront_cart.json.log"
    CART_FILE_SUFFIX: Final[str] = ".json"


class ErrorCodes:
    """Error codes carried on CartError instances"""

    GENERAL_ERROR: Final[str] = "GENERAL_ERROR"
    VALIDATION_ERROR: Final[str] = "VALIDATION_ERROR"
    STOCK_LIMIT_EXCEEDED: Final[str] = "STOCK_LIMIT_EXCEEDED"
    PERSISTENCE_UNAVAILABLE: Final[str] = "PERSISTENCE_UNAVAILABLE"
    INVALID_PAYLOAD: Final[str] = "INVALID_PAYLOAD"
