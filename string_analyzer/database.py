from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

from string_analyzer import config

logger = logging.getLogger(__name__)

Base = declarative_base()


# ------------------------------------------------------------------------------
# DATABASE ENGINE & SESSION
# ------------------------------------------------------------------------------
def create_db_engine(url: str = None) -> Engine:
    """Create the SQLAlchemy engine for the given (or configured) URL."""
    url = url or config.DATABASE_URL
    connect_args = {}
    if url.startswith("sqlite"):
        # Endpoints run in the threadpool
        connect_args["check_same_thread"] = False
    try:
        return create_engine(
            url,
            pool_pre_ping=True,   # prevents "MySQL server has gone away" issues
            pool_recycle=280,     # helps with idle connection timeouts
            connect_args=connect_args,
        )
    except Exception as e:
        logger.error(f"❌ Failed to create SQLAlchemy engine: {e}")
        raise


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


# ------------------------------------------------------------------------------
# INITIALIZATION
# ------------------------------------------------------------------------------
def init_db(engine: Engine):
    """Initialize database tables (runs once on startup)."""
    from string_analyzer.models import string  # noqa: F401  ensure models are imported
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("✅ Database tables created successfully.")
    except Exception as e:
        logger.error(f"❌ Database initialization failed: {e}")
        raise
