"""
Infrastructure services
"""

from .notification_service import (
    LoggingCartNotifier,
    NullCartNotifier,
    RecordingCartNotifier,
    format_toast,
)

__all__ = [
    "LoggingCartNotifier",
    "NullCartNotifier",
    "RecordingCartNotifier",
    "format_toast",
]
