# =============================================================================
# lib/database.py - SQLAlchemy Engine and Session Management
# =============================================================================
# This module owns the single engine and session factory used by the
# application. It implements the singleton pattern to reuse one connection
# pool and exposes:
# - Base: declarative base for the ORM tables in core/models/tables.py
# - Database: lazily-created engine + sessionmaker
# - init_schema: creates tables that are declared but missing
#
# Usage:
#   from lib.database import Database
#   with Database.get_session_factory()() as session:
#       ...
# =============================================================================

from __future__ import annotations

import logging

from sqlalchemy import Engine, MetaData, create_engine, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all ORM tables."""
    pass


class DatabaseError(ApplicationError):
    """Error while creating the engine or applying the schema."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("code", "DATABASE_ERROR")
        super().__init__(message, **kwargs)


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given connection string.

    SQLite connections are shared between the event loop and the
    threadpool, so the same-thread check is disabled for them.
    """
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_engine(url, echo=echo, connect_args=connect_args)


class Database:
    """
    Process-wide holder for the engine and session factory.

    All methods are class methods; the engine is created on first use from
    the application settings unless `configure()` was called first.
    """

    _engine: Engine | None = None
    _session_factory: sessionmaker[Session] | None = None

    @classmethod
    def configure(cls, url: str, echo: bool = False) -> Engine:
        """Replace the engine with one bound to `url`."""
        cls.reset()
        try:
            cls._engine = create_db_engine(url, echo=echo)
        except (SQLAlchemyError, ValueError) as e:
            raise DatabaseError(
                message=f"Failed to create database engine: {e}",
                code="ENGINE_INIT_FAILED",
                suggestion="Check DATABASE_URL in your .env file",
                details={"url": url},
            )
        cls._session_factory = sessionmaker(bind=cls._engine, expire_on_commit=False)
        logger.info(f"Database engine initialized for {cls._engine.url.render_as_string()}")
        return cls._engine

    @classmethod
    def get_engine(cls) -> Engine:
        """Get or create the singleton engine."""
        if cls._engine is None:
            from app.config import settings

            cls.configure(settings.DATABASE_URL, echo=settings.DEBUG)
        return cls._engine

    @classmethod
    def get_session_factory(cls) -> sessionmaker[Session]:
        """Get the session factory bound to the singleton engine."""
        if cls._session_factory is None:
            cls.get_engine()
        return cls._session_factory

    @classmethod
    def reset(cls) -> None:
        """Dispose the current engine, if any."""
        if cls._engine is not None:
            cls._engine.dispose()
        cls._engine = None
        cls._session_factory = None


def init_schema(engine: Engine, metadata: MetaData = Base.metadata) -> list[str]:
    """
    Create every table declared in `metadata` that the database lacks.

    Returns:
        Names of the tables that were created (empty when up to date)

    Raises:
        DatabaseError: If the schema cannot be inspected or created
    """
    try:
        existing = set(inspect(engine).get_table_names())
        pending = [name for name in metadata.tables if name not in existing]

        if pending:
            logger.info(f"Applying pending schema changes: {', '.join(pending)}")
            metadata.create_all(engine)

        return pending

    except SQLAlchemyError as e:
        raise DatabaseError(
            message=f"Failed to apply schema: {e}",
            code="SCHEMA_INIT_FAILED",
            suggestion="Check that the database file is writable",
        )
