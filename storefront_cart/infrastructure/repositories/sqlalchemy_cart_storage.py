"""
SQLAlchemy Cart Storage

Concrete implementation of CartStorage using a key/value table, so carts
can be kept server-side and keyed by the signed-in user.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from storefront_cart.domain.repositories.cart_storage import CartStorage
from storefront_cart.infrastructure.database.models import CartPayload
from storefront_cart.infrastructure.database.operations import DatabaseManager
from storefront_cart.infrastructure.repositories.session_handler import managed_session
from storefront_cart.infrastructure.utilities.exceptions import PersistenceUnavailableError


class SQLAlchemyCartStorage(CartStorage):
    """SQLAlchemy implementation of cart storage"""

    def __init__(self, db_manager: DatabaseManager, create_tables: bool = True):
        self._db = db_manager
        self._logger = logging.getLogger(self.__class__.__name__)
        if create_tables:
            self._db.create_tables()

    def load(self, key: str) -> Optional[str]:
        try:
            with managed_session(self._db.get_session) as session:
                row = session.get(CartPayload, key)
                if row is None:
                    self._logger.debug("📭 NO CART: %s", key)
                    return None
                return row.payload
        except SQLAlchemyError as e:
            raise PersistenceUnavailableError(
                f"Failed to load cart {key}: {e}", operation="load"
            ) from e

    def save(self, key: str, value: str) -> None:
        try:
            with managed_session(self._db.get_session) as session:
                row = session.get(CartPayload, key)
                if row is None:
                    session.add(CartPayload(key=key, payload=value))
                else:
                    row.payload = value
        except SQLAlchemyError as e:
            raise PersistenceUnavailableError(
                f"Failed to save cart {key}: {e}", operation="save"
            ) from e
        self._logger.debug("💾 SAVED: %s", key)

    def delete(self, key: str) -> None:
        try:
            with managed_session(self._db.get_session) as session:
                row = session.get(CartPayload, key)
                if row is not None:
                    session.delete(row)
        except SQLAlchemyError as e:
            raise PersistenceUnavailableError(
                f"Failed to delete cart {key}: {e}", operation="delete"
            ) from e
