"""
Database engine and session management
"""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront_cart.infrastructure.database.models import Base
from storefront_cart.infrastructure.utilities.exceptions import PersistenceUnavailableError


class DatabaseManager:
    """Lazily creates the engine and session factory for a database URL"""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self.logger = logging.getLogger(__name__)

    def get_engine(self) -> Engine:
        """Get database engine with proper configuration"""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        url = make_url(self.database_url)
        engine_kwargs = {"echo": self.echo}

        if url.get_backend_name() == "sqlite":
            if url.database and url.database != ":memory:":
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
            else:
                # In-memory databases live as long as their single connection
                engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs["pool_pre_ping"] = True

        return create_engine(url, **engine_kwargs)

    def get_session_factory(self) -> sessionmaker:
        """Get session factory"""
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.get_engine(), expire_on_commit=False)
        return self._session_factory

    def get_session(self) -> Session:
        """Get database session"""
        return self.get_session_factory()()

    def create_tables(self) -> None:
        """Create all database tables"""
        try:
            Base.metadata.create_all(self.get_engine())
            self.logger.info("Database tables created successfully")
        except SQLAlchemyError as e:
            self.logger.error("Failed to create database tables: %s", e)
            raise PersistenceUnavailableError(
                f"Failed to create tables: {e}", operation="create_tables"
            ) from e

    def dispose(self) -> None:
        """Release pooled connections"""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
