# orderdesk/utils/db.py

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from orderdesk.config import settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores FOREIGN KEY clauses (cascade and restrict) unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    if url.startswith("sqlite"):
        # check_same_thread=False is only needed for SQLite. It's not needed for other databases.
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        engine = create_engine(url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(url, echo=echo, **kwargs)


engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)


def init_db(bind: Engine | None = None) -> None:
    # Importing the models registers the tables on SQLModel.metadata
    import orderdesk.models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)


def get_session():
    # Dependency to yield a database session
    with Session(engine) as session:
        yield session
