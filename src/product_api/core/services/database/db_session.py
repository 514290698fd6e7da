"""Database engine and session factory used across the application."""

from typing import Any

from loguru import logger
from sqlalchemy import Engine, StaticPool, text
from sqlmodel import Session, create_engine

from src.product_api.runtime.config.config_data import DatabaseConfig
from src.product_api.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        """Initialize the shared database engine and session factory."""
        main_config = get_config()
        self._db_config = db_config or main_config.database
        self._environment = main_config.app.environment

        logger.info("Configuring database engine for environment: {}", self._environment)
        engine_kwargs = self._get_engine_kwargs()
        self._engine = create_engine(self._db_config.connection_string, **engine_kwargs)

        if self._environment == "production":
            logger.info(
                "Database engine initialized",
                pool_size=self._db_config.pool_size,
                max_overflow=self._db_config.max_overflow,
                pool_timeout=self._db_config.pool_timeout,
                pool_recycle=self._db_config.pool_recycle,
            )

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_engine_kwargs(self) -> dict[str, Any]:
        db_config = self._db_config
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(),
        }

        if db_config.is_sqlite:
            url = db_config.url
            if url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url:
                # In-memory databases live as long as their single connection
                engine_kwargs["poolclass"] = StaticPool
            if self._environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,  # Validate connections before use
            }
        )
        return engine_kwargs

    def _get_connect_args(self) -> dict[str, Any]:
        """Get database-specific connection arguments."""
        if self._db_config.is_sqlite:
            return {
                "check_same_thread": False,  # Sessions cross the request thread pool
                "timeout": 20,  # Lock timeout
            }
        if self._db_config.url.startswith("postgresql"):
            return {
                "application_name": f"{self._environment}_product_api",
                "connect_timeout": 30,
            }
        return {}

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        self._engine.dispose()
