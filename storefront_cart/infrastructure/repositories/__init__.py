"""
Storage implementations for the CartStorage contract.
"""

from .in_memory_cart_storage import InMemoryCartStorage
from .json_file_cart_storage import JsonFileCartStorage
from .sqlalchemy_cart_storage import SQLAlchemyCartStorage

__all__ = ["InMemoryCartStorage", "JsonFileCartStorage", "SQLAlchemyCartStorage"]
