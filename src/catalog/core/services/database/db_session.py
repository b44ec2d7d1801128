"""Engine ownership and session handling for the catalog database."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.catalog.runtime.config.config_data import ConfigData, DatabaseConfig
from src.catalog.runtime.context import get_config


def _connect_args(config: ConfigData) -> dict[str, Any]:
    """Driver-level connection arguments for the configured backend."""
    db = config.database
    if db.is_sqlite:
        if config.app.environment == "production":
            logger.warning("Running on SQLite in production; prefer PostgreSQL")
        # Request sessions are used from threadpool workers
        return {"check_same_thread": False, "timeout": 20}
    if db.url.startswith("postgresql"):
        return {
            "application_name": f"{config.app.name}-{config.app.environment}",
            "connect_timeout": 30,
            "options": "-c jit=off",
        }
    return {}


def _pool_args(db: DatabaseConfig) -> dict[str, Any]:
    if db.is_sqlite:
        return {}
    return {
        "pool_size": db.pool_size,
        "max_overflow": db.max_overflow,
        "pool_timeout": db.pool_timeout,
        "pool_recycle": db.pool_recycle,
    }


class DbSessionService:
    """Owns the engine for one configuration and hands out sessions on it."""

    def __init__(self, config: ConfigData | None = None):
        main_config = config or get_config()

        self._engine = create_engine(
            main_config.database.connection_string,
            pool_pre_ping=True,
            connect_args=_connect_args(main_config),
            **_pool_args(main_config.database),
        )
        logger.info(
            "Database engine ready ({} backend, {} environment)",
            self._engine.url.get_backend_name(),
            main_config.app.environment,
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        # Entities are read after commit, so keep their loaded state
        return Session(self._engine, expire_on_commit=False)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session, committing on success and rolling back on error."""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.debug("Rolled back database transaction: {}", type(e).__name__)
            raise
        finally:
            session.close()

    def health_check(self) -> bool:
        """True when the database answers a trivial query."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as e:
            logger.error("Database health check failed: {}", e)
            return False
        return True

    def get_pool_status(self) -> dict[str, int]:
        """Connection counters of the engine's pool; zero where the pool has none."""
        pool = self._engine.pool
        counters = {
            "size": "size",
            "checked_in": "checkedin",
            "checked_out": "checkedout",
            "overflow": "overflow",
        }
        return {
            key: getattr(pool, method)() if hasattr(pool, method) else 0
            for key, method in counters.items()
        }

    def dispose(self) -> None:
        self._engine.dispose()
