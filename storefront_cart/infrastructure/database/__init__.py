"""
Database Infrastructure

SQLAlchemy models and engine management for cart payloads.
"""

from .models import Base, CartPayload
from .operations import DatabaseManager

__all__ = ["Base", "CartPayload", "DatabaseManager"]
