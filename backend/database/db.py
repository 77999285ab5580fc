from collections.abc import Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Optional, Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.orm.session import Session

from configs.settings import DB_SETTINGS


def is_memory_sqlite(db_url: str) -> bool:
    url = make_url(db_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_db_engine(db_url: str, **kwargs) -> Engine:
    options = {
        "pool_recycle": DB_SETTINGS["pool_recycle"],
        "echo": DB_SETTINGS["echo"],
    }
    # in-memory SQLite runs on SingletonThreadPool, which takes no overflow
    if not is_memory_sqlite(db_url):
        options["pool_size"] = DB_SETTINGS["pool_size"]
        options["max_overflow"] = 10
    if db_url.startswith("sqlite"):
        options["connect_args"] = {"timeout": 15}
    options.update(kwargs)

    new_engine = create_engine(db_url, **options)

    if new_engine.dialect.name == "sqlite":

        @event.listens_for(new_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, _):
            cursor = dbapi_connection.cursor()
            # cascades and FK checks are off by default in SQLite
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.execute("PRAGMA journal_mode = WAL")
            cursor.close()

    return new_engine


engine = create_db_engine(DB_SETTINGS["db_url"])

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=True,
    autocommit=False,
    expire_on_commit=False,
    class_=Session,
)


Base = declarative_base()


def init(bind: Optional[Union[Engine, Connection]] = None):
    # models must be imported for their tables to be registered on Base.metadata
    import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_all(bind: Optional[Union[Engine, Connection]] = None):
    import models  # noqa: F401

    Base.metadata.drop_all(bind=bind or engine)


@contextmanager
def session_scope() -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def with_session(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        with session_scope() as session:
            return f(session, *args, **kwargs)

    return wrapper
