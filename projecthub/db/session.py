from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from projecthub.core.config import get_settings
from projecthub.db.base import Base

settings = get_settings()

connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create all tables that do not exist yet."""
    # Register models on the metadata
    import projecthub.db.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
