"""Core database functionality and configuration.

This module provides database management with environment-aware
configuration, connection pooling and transactional session handling.
"""

from contextlib import contextmanager
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Generator, Union
import os

from sqlalchemy import create_engine, Engine, inspect, text
from sqlalchemy.orm import scoped_session, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..models import Base
from ..config.environment import IS_PRODUCTION_ENVIRONMENT
from .reference_data import seed_reference_data

logger = logging.getLogger(__name__)

IN_MEMORY = ':memory:'

class DatabaseConfig:
    """Database configuration settings."""

    def __init__(
        self,
        sqlite_path: Optional[Union[Path, str]] = None,
        postgres_url: Optional[str] = None,
        echo: bool = False,
        pool_size: int = 3,
        max_overflow: int = 4,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        pool_pre_ping: bool = True
    ):
        """
        Initialize database configuration.

        In production environment, DATABASE_URL must be set in environment variables
        or provided explicitly via postgres_url parameter.

        Args:
            sqlite_path: Path to SQLite database file (for development),
                         or ':memory:' for a private in-memory database
            postgres_url: PostgreSQL connection URL (for production)
                        If not provided, will use DATABASE_URL env variable
            echo: Whether to echo SQL statements
            pool_size: Size of the connection pool (permanent connections)
            max_overflow: Maximum number of extra connections to allow temporarily
            pool_timeout: Seconds to wait for an available connection
            pool_recycle: Seconds before connections are recycled (prevent stale)
            pool_pre_ping: Whether to ping connections before using them

        Raises:
            ValueError: If in production environment and no database URL is provided
                      either via postgres_url parameter or DATABASE_URL env variable
        """
        if IS_PRODUCTION_ENVIRONMENT and sqlite_path is None:
            # For production, get URL from parameter or env variable
            self.postgres_url = postgres_url or os.environ.get('DATABASE_URL')
            if not self.postgres_url:
                raise ValueError(
                    "Database URL must be provided either via postgres_url parameter "
                    "or DATABASE_URL environment variable when in production environment"
                )
            self.sqlite_path = None
        else:
            # For development, handle SQLite path
            self.postgres_url = None
            self.sqlite_path = (
                sqlite_path
                or os.environ.get('ORGCAL_SQLITE_PATH')
                or Path(__file__).parent.parent.parent / 'data' / 'organization_calendar.db'
            )

        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.pool_pre_ping = pool_pre_ping

    @property
    def is_sqlite(self) -> bool:
        return self.sqlite_path is not None

    @property
    def connection_url(self) -> str:
        """Get the database connection URL based on configuration."""
        if self.is_sqlite:
            if str(self.sqlite_path) == IN_MEMORY:
                return "sqlite://"
            return f"sqlite:///{self.sqlite_path}"
        if not self.postgres_url:
            raise ValueError("PostgreSQL URL not configured")
        return self.postgres_url

    def get_engine_args(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine arguments based on configuration."""
        args = {"echo": self.echo}

        # SQLite-specific configuration
        if self.is_sqlite:
            args["connect_args"] = {"check_same_thread": False}
            args["poolclass"] = StaticPool

        # PostgreSQL-specific configuration
        else:
            args.update({
                "pool_size": self.pool_size,
                "max_overflow": self.max_overflow,
                "pool_timeout": self.pool_timeout,
                "pool_recycle": self.pool_recycle,
                "pool_pre_ping": self.pool_pre_ping
            })

        return args

class DatabaseError(Exception):
    """Base exception for database-related errors."""
    pass

class ConnectionError(DatabaseError):
    """Raised when there are issues connecting to the database."""
    pass

class SessionError(DatabaseError):
    """Raised when there are issues with database sessions."""
    pass

class Database:
    """Owns the engine and hands out transactional sessions."""

    def __init__(self, config: Optional[DatabaseConfig] = None):
        self.config = config or DatabaseConfig()
        self.engine: Optional[Engine] = None
        # Rows returned by the repository are used after their session closes
        self._session_factory = sessionmaker(expire_on_commit=False)
        self._scoped_session = scoped_session(self._session_factory)
        self._tables_checked = False

        # Initialize engine on creation
        self._setup_engine()

    def _setup_engine(self) -> None:
        """Set up the SQLAlchemy engine."""
        try:
            self.engine = create_engine(
                self.config.connection_url,
                **self.config.get_engine_args()
            )
            self._session_factory.configure(bind=self.engine)
        except Exception as e:
            raise ConnectionError(f"Failed to create database engine: {e}") from e

    def _ensure_sqlite_directory(self) -> None:
        if self.config.is_sqlite and str(self.config.sqlite_path) != IN_MEMORY:
            Path(self.config.sqlite_path).parent.mkdir(parents=True, exist_ok=True)

    def init_db(self) -> None:
        """Create the schema and the reference rows (houses, admin user)."""
        if not self.engine:
            raise ConnectionError("Database engine not initialized")

        self._ensure_sqlite_directory()
        try:
            Base.metadata.create_all(self.engine)
            logger.info("Database schema initialized successfully")
        except Exception as e:
            raise DatabaseError(f"Failed to initialize database schema: {e}") from e

        self._tables_checked = True
        with self.session() as session:
            seed_reference_data(session)

    def ensure_tables_exist(self) -> None:
        """Ensure all required database tables exist."""
        if self._tables_checked:
            return
        if not self.engine:
            raise ConnectionError("Database engine not initialized")

        self._ensure_sqlite_directory()
        try:
            existing_tables = set(inspect(self.engine).get_table_names())
            required_tables = set(Base.metadata.tables)
        except Exception as e:
            raise DatabaseError(f"Failed to verify database schema: {e}") from e

        if not required_tables <= existing_tables:
            logger.info("Some tables missing, initializing database schema")
            self.init_db()
        self._tables_checked = True

    def test_connection(self) -> None:
        """Run a trivial query, raising ConnectionError if the database is unreachable."""
        try:
            with self.engine.connect() as conn:
                if conn.execute(text("SELECT 1")).scalar() != 1:
                    raise ConnectionError("Database connection test failed")
        except ConnectionError:
            raise
        except Exception as e:
            raise ConnectionError(f"Database connection failed: {e}") from e

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Provide a transactional scope around a series of operations.

        Commits when the block completes, rolls back and re-raises as
        SessionError when it fails, and always closes the session.

        Example:
            with db.session() as session:
                event = session.get(Event, 5)
                event.title = "New Title"
                # No need to call commit - it's handled automatically

        Raises:
            SessionError: If there are issues with the session
            DatabaseError: If database schema verification fails
        """
        # Ensure tables exist before providing a session
        self.ensure_tables_exist()

        session = self._scoped_session()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            raise SessionError(f"Database session error: {e}") from e
        finally:
            session.close()
            self._scoped_session.remove()

    def dispose(self) -> None:
        """Release pooled connections."""
        self._scoped_session.remove()
        if self.engine is not None:
            self.engine.dispose()

# Global database instance with default configuration
db = Database()
