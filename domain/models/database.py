"""
Database configuration and session management.
"""

import logging
from sqlalchemy import BigInteger, Integer, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("fitcoach.database")

# Create SQLAlchemy Base
Base = declarative_base()

# Store-generated integer keys. SQLite only autoincrements INTEGER PRIMARY KEY.
BigIntId = BigInteger().with_variant(Integer, "sqlite")


def enable_sqlite_foreign_keys(target: Engine) -> None:
    """Turn on foreign key enforcement (and so ON DELETE CASCADE) for SQLite connections"""
    if target.dialect.name != "sqlite":
        return

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Create engine
engine = create_engine(settings.database_url, echo=settings.db_echo, future=True)
enable_sqlite_foreign_keys(engine)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True)


def init_database(bind=None):
    """Initialize database schema"""
    bind = bind or engine
    with bind.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
