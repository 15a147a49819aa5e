"""
Database initialization utilities.
"""
import logging
from pathlib import Path
from sqlalchemy.engine import Engine
from ensgraph.db.models import Base
from ensgraph.db.database import engine as default_engine

logger = logging.getLogger(__name__)


def ensure_storage_directory(engine: Engine = default_engine):
    """Create the parent directory of a file-backed SQLite database."""
    url = engine.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_tables(engine: Engine = default_engine):
    """Create all tables defined in models."""
    logger.info("Creating database tables...")
    ensure_storage_directory(engine)
    Base.metadata.create_all(bind=engine)
    logger.info("All tables created successfully")


def drop_all_tables(engine: Engine = default_engine):
    """Drop all tables (useful for testing)."""
    logger.info("Dropping all database tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("All tables dropped successfully")


def reset_database(engine: Engine = default_engine):
    """Drop and recreate all tables."""
    logger.info("Resetting database...")
    ensure_storage_directory(engine)
    drop_all_tables(engine)
    create_tables(engine)
    logger.info("Database reset complete")


def init_database(engine: Engine = default_engine):
    """Complete database initialization."""
    logger.info("Initializing database...")
    create_tables(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
