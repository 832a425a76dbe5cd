from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker


Base = declarative_base()

engine: Engine | None = None
SessionLocal: sessionmaker | None = None


def init_database(database_url: str) -> Engine:
    global engine, SessionLocal

    # Registers every model on Base.metadata before create_all.
    from coursemart.models import admin, course, user  # noqa: F401

    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    engine = create_engine(database_url, connect_args=connect_args)
    SessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    Base.metadata.create_all(bind=engine)
    return engine


def get_db() -> Iterator[Session]:
    if SessionLocal is None:
        raise RuntimeError("Database is not initialized. Call init_database() at startup.")

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
