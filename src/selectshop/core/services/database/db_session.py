"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.selectshop.runtime.config.config_data import ConfigData
from src.selectshop.runtime.context import get_config


def engine_options(config: ConfigData) -> dict[str, Any]:
    """Keyword arguments for ``create_engine`` matching the configured backend."""
    db = config.database
    environment = config.app.environment
    options: dict[str, Any] = {"echo": db.echo}

    if db.is_sqlite:
        # Sessions are handed across FastAPI's threadpool
        options["connect_args"] = {"check_same_thread": False, "timeout": 20}
        if ":memory:" in db.url:
            # A second connection would see an empty database
            options["poolclass"] = StaticPool
        if environment == "production":
            logger.warning("Running on SQLite in production; PostgreSQL is recommended")
        return options

    if db.url.startswith("postgresql"):
        options["connect_args"] = {
            "application_name": f"selectshop_{environment}",
            "connect_timeout": 30,
        }
    options.update(
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_timeout=db.pool_timeout,
        pool_recycle=db.pool_recycle,
        pool_pre_ping=True,
    )
    return options


class DbSessionService:
    """Owns the process-wide engine and hands out sessions bound to it.

    Pass ``engine`` to reuse an existing engine, as the tests do with an
    in-memory database.
    """

    def __init__(self, config: ConfigData | None = None, engine: Engine | None = None):
        if engine is None:
            config = config or get_config()
            logger.info(
                "Creating database engine for {} ({})",
                config.app.environment,
                "sqlite" if config.database.is_sqlite else "server",
            )
            engine = create_engine(config.database.url, **engine_options(config))
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        return Session(self._engine, expire_on_commit=False, autoflush=True)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Run a block as one unit of work: commit on success, roll back on error."""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            logger.exception("Database transaction rolled back")
            raise
        finally:
            session.close()

    def health_check(self) -> bool:
        """True when a trivial query succeeds."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error("Database health check failed: {}", e)
            return False
        return True

    def get_pool_status(self) -> dict[str, int]:
        """Connection counts of the engine's pool; zero where the pool does not track them."""
        pool = self._engine.pool
        status = {}
        for key, method in (
            ("size", "size"),
            ("checked_in", "checkedin"),
            ("checked_out", "checkedout"),
            ("overflow", "overflow"),
        ):
            counter = getattr(pool, method, None)
            status[key] = counter() if callable(counter) else 0
        return status
