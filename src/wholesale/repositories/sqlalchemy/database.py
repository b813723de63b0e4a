"""Database connection and session management."""

from typing import Generator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool

from wholesale.config.settings import Settings, get_settings

Base = declarative_base()

# Module-level database state (can be reconfigured at runtime)
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def build_engine(settings: Settings) -> Engine:
    """Create an engine for the configured datastore."""
    url = settings.get_database_url()
    kwargs = {"echo": settings.db_echo}
    if settings.is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}  # SQLite-specific
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(url, **kwargs)


def configure_database(settings: Optional[Settings] = None) -> Engine:
    """(Re)bind the module engine and session factory to the given settings."""
    global _engine, _SessionLocal

    reset_database()
    _engine = build_engine(settings or get_settings())
    _SessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=_engine,
    )
    return _engine


def get_engine() -> Engine:
    """Get or create the database engine."""
    if _engine is None:
        return configure_database()
    return _engine


def get_session_factory() -> sessionmaker:
    """Get or create the session factory."""
    if _SessionLocal is None:
        configure_database()
    return _SessionLocal


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    SessionLocal = get_session_factory()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Initialize database tables."""
    from wholesale.repositories.sqlalchemy import orm_models  # noqa: F401

    engine = get_engine()
    Base.metadata.create_all(bind=engine)


def reset_database() -> None:
    """Reset database state (for reconfiguration)."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()

    _engine = None
    _SessionLocal = None
