# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration (SQLite by default, any SQLAlchemy URL works)
- Session factory used by the SQL entity store
- Connection utilities

Usage:
     from database import get_session_context

     with get_session_context() as db:
          records = db.query(EntityRecord).all()
     """
import logging
from contextlib import contextmanager
from typing import Callable, Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

import config

logger = logging.getLogger(__name__)


def make_engine(url: str = config.DATABASE_URL) -> Engine:
     """
     Create an engine for the given URL.

     SQLite connections are shared across threads (FastAPI runs sync
     routes in a threadpool); other databases get a recycled pool.
     """
     if url.startswith("sqlite"):
          return create_engine(
               url,
               connect_args={"check_same_thread": False},
               echo=config.SQL_ECHO,
          )
     return create_engine(
          url,
          pool_size=5,
          max_overflow=10,
          pool_timeout=30,
          pool_recycle=1800,  # Recycle connections after 30 minutes
          echo=config.SQL_ECHO,
     )


def make_session_factory(bind: Engine) -> sessionmaker:
     return sessionmaker(
          bind=bind,
          autocommit=False,
          autoflush=False,
          expire_on_commit=False,
     )


# Create SQLAlchemy engine
engine = make_engine()

# Session factory
SessionLocal = make_session_factory(engine)


@contextmanager
def get_session_context(
     session_factory: Optional[Callable[[], Session]] = None,
) -> Generator[Session, None, None]:
     """
     Context manager for database sessions.

     Commits on success, rolls back and re-raises on any exception.

     Usage:
          with get_session_context() as db:
               records = db.query(EntityRecord).all()

     Yields:
          Session: SQLAlchemy database session
     """
     session = (session_factory or SessionLocal)()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def init_db(bind: Optional[Engine] = None) -> None:
     """
     Initialize database tables.

     Creates all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     Base.metadata.create_all(bind=bind or engine)


def check_connection(bind: Optional[Engine] = None) -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          with (bind or engine).connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except SQLAlchemyError as e:
          logger.error("Database connection failed: %s", e)
          return False
