from contextlib import contextmanager
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Generator, Iterator
import logging

from .config import settings

logger = logging.getLogger(__name__)

# ============================================================
# Database Engine
# ============================================================

def build_engine_options(url: str) -> dict:
    """
    Engine keyword arguments for the given URL.
    SQLite gets a thread-tolerant connection, everything else a sized pool.
    """
    options = {
        "echo": settings.DB_ECHO,
        "future": True,
        "pool_pre_ping": True,
    }
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=30,
            pool_recycle=3600,
        )
    return options


engine = create_engine(settings.DATABASE_URL, **build_engine_options(settings.DATABASE_URL))

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False
)

# ============================================================
# Base Model
# ============================================================

Base = declarative_base()

# ============================================================
# Connection Event Listeners
# ============================================================

def enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    """SQLite ignores FOREIGN KEY clauses unless asked per connection"""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def register_engine_events(target_engine) -> None:
    if target_engine.dialect.name == "sqlite":
        event.listen(target_engine, "connect", enable_sqlite_foreign_keys)

    @event.listens_for(target_engine, "connect")
    def receive_connect(dbapi_conn, connection_record):
        """Log database connections"""
        logger.debug("Database connection established")

    @event.listens_for(target_engine, "checkout")
    def receive_checkout(dbapi_conn, connection_record, connection_proxy):
        """Log when connection is checked out from pool"""
        logger.debug("Connection checked out from pool")


register_engine_events(engine)

# ============================================================
# Session Dependency
# ============================================================

def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI endpoints.

    Usage:
        @app.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    Run a block of writes as one unit of work.

    Commits when the block exits normally. Any exception rolls the whole
    session back and is re-raised unchanged.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise

# ============================================================
# Database Health Check
# ============================================================

def check_db_health(bind=None) -> bool:
    """
    Check if database is accessible and responsive.
    Returns True if healthy, False otherwise.
    """
    db = SessionLocal(bind=bind) if bind is not None else SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False
    finally:
        db.close()

# ============================================================
# Startup/Shutdown Handlers
# ============================================================

def create_tables(bind=None) -> None:
    """Create every table registered on Base.metadata"""
    # models must be imported so their tables are registered
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def init_db():
    try:
        logger.info("🔄 Checking database connection...")

        if check_db_health():
            logger.info("✅ Database health check passed")
        else:
            logger.error("❌ Database health check failed")

        if settings.CREATE_TABLES_ON_STARTUP:
            create_tables()
            logger.info("✅ Database tables ensured")

    except Exception as e:
        logger.error(f"❌ Database init failed: {e}", exc_info=True)
        raise


def close_db():
    """
    Close database connections on shutdown.
    """
    try:
        logger.info("🔄 Closing database connections...")
        engine.dispose()
        logger.info("✅ Database connections closed")
    except Exception as e:
        logger.error(f"❌ Error closing database: {e}")


__all__ = [
    'Base',
    'engine',
    'SessionLocal',
    'get_db',
    'atomic',
    'check_db_health',
    'create_tables',
    'init_db',
    'close_db',
]
