from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from globetrotter.config import get_settings
import logging

logger = logging.getLogger(__name__)
settings = get_settings()

db_url = settings.database_url

connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
engine = create_engine(db_url, connect_args=connect_args)


# Enable foreign key constraints for SQLite
# Without this, ON DELETE CASCADE doesn't work!
@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    if not db_url.startswith("sqlite"):
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ensure_sqlite_dir():
    """Create the parent directory of a file-backed SQLite database."""
    if not db_url.startswith("sqlite:///") or db_url.endswith(":memory:"):
        return
    db_path = Path(db_url.replace("sqlite:///", "", 1))
    if not db_path.parent.exists():
        db_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created database directory {db_path.parent}")
