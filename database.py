from sqlalchemy import create_engine, MetaData
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from settings import DATABASE_URL, SQL_ECHO

metadata = MetaData()
Base = declarative_base(metadata=metadata)


def make_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO):
    """Create an engine; SQLite connections may be shared across threads."""
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # A pure in-memory database lives only as long as its one connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=echo, **kwargs)


# Create a SQLAlchemy engine for the configured store
engine = make_engine()
