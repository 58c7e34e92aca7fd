"""
Database configuration and session management.

Provides SQLAlchemy engine setup, the session factory, and schema
lifecycle (create, drop, reset) for the school database. A Database is
an injected handle: nothing here reads global settings, so tests can
point each instance at its own in-memory or temporary file database.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from school.core.logging_config import get_logger
from school.models.base import Base

logger = get_logger(__name__)

# Files SQLite may leave next to the main database file
_SQLITE_SIDECAR_SUFFIXES = ("-journal", "-wal", "-shm")


def sqlite_file_path(database_url: str) -> Optional[Path]:
    """
    Return the file path of a file-backed SQLite URL.

    Returns:
        Path of the database file, or None for in-memory databases

    Raises:
        ValueError: For SQLite URI filenames (``file:...``), whose path
            could not be deleted reliably on reset
    """
    url = make_url(database_url)
    database = url.database
    if (database and database.startswith("file:")) or url.query.get("uri") == "true":
        raise ValueError(f"SQLite URI filenames are not supported: {database_url}")
    if not database or database == ":memory:":
        return None
    return Path(database)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create and configure the SQLAlchemy engine.

    For SQLite:
    - Enables check_same_thread=False so the engine may be handed around
    - Uses StaticPool for in-memory databases, so every session shares
      the single connection (and therefore the same database)
    - Turns on foreign key enforcement for every new connection

    Args:
        database_url: SQLAlchemy URL
        echo: Log every SQL statement (debug only)

    Returns:
        Configured Engine instance
    """
    engine_kwargs: dict = {
        "echo": echo,
        "connect_args": {"check_same_thread": False},
    }

    if sqlite_file_path(database_url) is None:
        engine_kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, **engine_kwargs)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


class Database:
    """
    Owns the engine and session factory for one database.

    Use as a context manager to guarantee the engine is disposed on
    every exit path:

        with Database("sqlite:///./School.db") as db:
            db.reset_and_create_schema()
            with db.session() as session:
                ...

    Attributes:
        database_url: SQLAlchemy URL this handle is bound to
        engine: SQLAlchemy engine
        session_factory: sessionmaker producing Session objects
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine = create_db_engine(database_url, echo=echo)
        self.session_factory = sessionmaker(
            self.engine,
            class_=Session,
            expire_on_commit=False,  # Keep generated ids readable after commit
            autoflush=False,
        )

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.dispose()

    def create_schema(self) -> None:
        """
        Create the students, subjects and link tables if missing.

        Safe to call multiple times. For file databases the parent
        directory is created first.
        """
        # Import models to ensure metadata is populated before create_all()
        from school import models  # noqa: F401

        path = sqlite_file_path(self.database_url)
        if path is not None:
            path.parent.mkdir(parents=True, exist_ok=True)

        Base.metadata.create_all(self.engine)
        logger.info("Database schema created", extra={"database_url": self.database_url})

    def drop_schema(self) -> None:
        """
        Delete the database.

        A file-backed database is removed from disk along with any
        journal files; an in-memory database has all its tables dropped.
        A database that does not exist yet is not an error.
        """
        from school import models  # noqa: F401

        path = sqlite_file_path(self.database_url)
        if path is None:
            Base.metadata.drop_all(self.engine)
        else:
            # Close pooled connections so the file can be removed
            self.engine.dispose()
            for candidate in [path] + [
                path.with_name(path.name + suffix) for suffix in _SQLITE_SIDECAR_SUFFIXES
            ]:
                candidate.unlink(missing_ok=True)

        logger.info("Database dropped", extra={"database_url": self.database_url})

    def reset_and_create_schema(self) -> None:
        """
        Drop the database and create a fresh, empty schema.

        Destructive: meant for demo and test bootstrap only.
        """
        self.drop_schema()
        self.create_schema()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Provide a session scoped to a ``with`` block.

        Yields:
            Session instance for database operations

        Note:
            - Exceptions trigger a rollback and are re-raised
            - The session is always closed on exit
            - Committing is the caller's job (the repository commits
              after every operation)
        """
        session = self.session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def check_connection(self) -> bool:
        """
        Check if the database connection is healthy.

        Returns:
            True if the database answers a trivial query, False otherwise
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection check failed: {e}")
            return False

    def dispose(self) -> None:
        """Release all pooled connections."""
        self.engine.dispose()
