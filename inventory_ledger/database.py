"""Database engine, session factory and declarative base."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def create_ledger_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine, applying the SQLite options the ledger needs.

    In-memory SQLite databases share a single connection so every session
    sees the same tables.
    """
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def create_tables(engine: Engine):
    """Create all ledger tables that do not exist yet."""
    # Register every model on Base.metadata
    from inventory_ledger import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
