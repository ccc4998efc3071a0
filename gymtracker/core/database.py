"""
Embedded database setup.

The store lives in a single SQLite file inside the configured storage
directory. The directory is created on first use.
"""
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from gymtracker.core.config import Settings
from gymtracker.core.exceptions import StoreUnavailableError
from gymtracker.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all tables."""


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the engine for the configured storage path.

    Raises:
        StoreUnavailableError: the directory cannot be created
    """
    db_dir = settings.database_file.parent
    try:
        db_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreUnavailableError(settings.DB_PATH, str(e)) from e

    # Statement logging is routed through setup_logging, see DB_ECHO
    engine = create_engine(settings.database_url)
    event.listen(engine, "connect", _enable_foreign_keys)
    return engine


def init_db(engine: Engine, path: str) -> None:
    """
    Create tables that do not exist yet.

    Raises:
        StoreUnavailableError: the database file cannot be opened or written
    """
    # Register table metadata before create_all
    from gymtracker import models  # noqa: F401

    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as e:
        raise StoreUnavailableError(path, str(e)) from e

    logger.debug("Database initialized", path=path)


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)
