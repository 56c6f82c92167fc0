from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from .config import DATABASE_URL
from .models import Base

engine = create_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine)


def init_db(bind=None) -> None:
    """Create all tables on the given engine (default: configured engine)."""
    Base.metadata.create_all(bind=bind or engine)
