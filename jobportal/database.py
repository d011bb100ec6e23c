import logging
from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ships with FK enforcement off; ON DELETE CASCADE depends on it.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine and its connection pool.

    Built once by the application factory, opened at startup and closed at
    shutdown. Request handlers receive sessions through ``get_db``.
    """

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_timeout: int = 30,
    ) -> None:
        self.url = url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self._engine: Engine | None = None
        self._sessionmaker: sessionmaker | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> "Database":
        if self._engine is not None:
            return self
        if self.url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
        else:
            kwargs = {
                "pool_pre_ping": True,
                "pool_size": self.pool_size,
                "max_overflow": self.max_overflow,
                "pool_timeout": self.pool_timeout,
            }
        self._engine = create_engine(self.url, **kwargs)
        if self.url.startswith("sqlite"):
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)
        self._sessionmaker = sessionmaker(autocommit=False, autoflush=False, bind=self._engine)
        logger.info("Database pool opened")
        return self

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        logger.info("Database pool closed")

    def session(self) -> Session:
        if self._sessionmaker is None:
            raise RuntimeError("Database is not open")
        return self._sessionmaker()

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_all(self) -> None:
        import jobportal.models  # noqa: F401

        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info("Database initialized")
        except Exception as e:
            logger.exception("Database initialization failed: %s", e)
            raise

    def ensure_tables_exist(self) -> list[str]:
        """Create any missing tables without touching existing data. Returns created table names."""
        import jobportal.models  # noqa: F401

        try:
            existing_tables = set(inspect(self.engine).get_table_names())
            # create_all only creates missing tables, never drops existing ones.
            Base.metadata.create_all(bind=self.engine)
            created_tables = sorted(set(Base.metadata.tables.keys()) - existing_tables)
            if created_tables:
                logger.info("Created missing DB tables: %s", ", ".join(created_tables))
            else:
                logger.info("All DB tables already exist; no schema changes applied.")
            return created_tables
        except Exception as e:
            logger.exception("Ensure tables failed: %s", e)
            raise


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
