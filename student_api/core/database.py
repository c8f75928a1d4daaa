from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from typing import Optional
from .exceptions import StorageError
import logging

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# STORAGE HANDLE
# =============================================================================

class StudentStorage:
    """
    Owns the engine and session factory for the student database file.

    Constructed once at startup and handed to request handlers through a
    dependency.

    SQLite allows a single writer at a time. Concurrent requests share the
    engine's connection pool and rely on SQLite's own file locking; no
    application-level lock or transaction spans more than one statement.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def _create_engine(self) -> Engine:
        options = {
            "echo": self.echo,  # Print all SQL queries to console
            # Sync endpoints run in a thread pool
            "connect_args": {"check_same_thread": False},
        }
        if self.database_url in ("sqlite://", "sqlite:///:memory:"):
            # Every session must see the same in-memory database
            options["poolclass"] = StaticPool
        return create_engine(self.database_url, **options)

    def open(self) -> None:
        """
        Open (or create) the database, check the connection and make sure the
        students table exists.

        Raises:
            StorageError: if any of the three steps fails
        """
        logger.info(f"Opening database {self.database_url}")
        try:
            self.engine = self._create_engine()
            event.listen(self.engine, "connect", _on_connect)
        except SQLAlchemyError as e:
            raise StorageError(f"failed to open database: {e}") from e

        if not self.check_connection():
            self.close()
            raise StorageError(f"error pinging database: {self.database_url}")

        try:
            self.create_tables()
        except SQLAlchemyError as e:
            self.close()
            raise StorageError(f"error creating table: {e}") from e

        self._session_factory = sessionmaker(
            autocommit=False,  # Don't auto-commit transactions
            autoflush=False,   # Don't auto-flush before queries
            bind=self.engine,
            expire_on_commit=False  # Don't expire objects after commit
        )
        logger.info("✅ Database initialized successfully!")

    def check_connection(self) -> bool:
        """
        Check if database connection is working.

        Returns:
            bool: True if connection successful, False otherwise
        """
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            logger.info("✅ Database connection successful!")
            return True
        except SQLAlchemyError as e:
            logger.error(f"❌ Database connection failed: {e}")
            return False

    def create_tables(self) -> None:
        """Create the students table if it is absent."""
        # Registers the Student model on Base.metadata
        from student_api.models import student  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        if self._session_factory is None:
            raise StorageError("storage is not open")
        return self._session_factory()

    def close(self) -> None:
        """Release every pooled connection. Safe to call more than once."""
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connection closed")
        self.engine = None
        self._session_factory = None


# =============================================================================
# EVENT LISTENERS
# =============================================================================

def _on_connect(dbapi_conn, connection_record):
    logger.debug("New database connection established")
