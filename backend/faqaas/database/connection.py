# faqaas/database/connection.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

# Base class for models
Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        # The check_same_thread argument is needed only for SQLite.
        # It's a workaround for how FastAPI handles multithreading.
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session gets its own empty DB
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)

    return create_engine(database_url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Creates the tables and the search index if they are missing."""
    # Import from the package (faqaas.models) to ensure all classes are registered
    from faqaas.models import FAQRecord, FAQTextRecord  # noqa: F401
    from faqaas.database.search_index import create_search_index

    Base.metadata.create_all(bind=engine)
    create_search_index(engine)
