"""
Context manager for handling database sessions and exceptions.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Generator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@contextmanager
def managed_session(session_factory: Callable[[], Session]) -> Generator[Session, None, None]:
    """
    Context manager for handling database sessions, including commits,
    rollbacks and exception logging.

    Yields:
        Session: The SQLAlchemy session object.

    Raises:
        SQLAlchemyError: If a database-related error occurs.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        logger.error("💥 DATABASE ERROR: %s", e)
        session.rollback()
        raise
    finally:
        session.close()
