from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from jobboard.core.config import settings


def _engine_options(url: str) -> dict:
    """SQLite (tests, local runs) cannot take the pooling options used for Postgres."""
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using them
        "pool_size": 10,
        "max_overflow": 20,
    }


# Create SQLAlchemy engine
engine = create_engine(settings.SQLALCHEMY_DATABASE_URI, **_engine_options(settings.SQLALCHEMY_DATABASE_URI))

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Imports the models so they register on Base.metadata, then creates
    any missing tables (users, persons, listings, applications).
    """
    from jobboard import models  # noqa: F401
    Base.metadata.create_all(bind=engine)


def close_db():
    """Release every pooled connection. Called on application shutdown."""
    engine.dispose()
