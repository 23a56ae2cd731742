from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker


Base = declarative_base()

engine: Engine | None = None
SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # SQLite ignores ON DELETE / ON UPDATE actions unless this is set per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(url: str, *, echo: bool = False) -> Engine:
    eng = create_engine(url, echo=echo, pool_pre_ping=True, future=True)
    if eng.dialect.name == "sqlite":
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)
    return eng


def init_engine(url: str, *, echo: bool = False) -> Engine:
    global engine
    if engine is not None:
        engine.dispose()
    engine = make_engine(url, echo=echo)
    SessionLocal.configure(bind=engine)
    return engine


def get_engine() -> Engine:
    if engine is None:
        from config import get_config

        cfg = get_config()
        return init_engine(cfg.DATABASE_URL, echo=cfg.DB_ECHO)
    return engine
