"""Database configuration: engine, session factory and FastAPI session dependency."""
import os
from typing import Generator

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

load_dotenv()


POSTGRES_HOST = os.getenv('POSTGRES_HOST', 'localhost')
POSTGRES_PORT = os.getenv('POSTGRES_PORT', '5432')
POSTGRES_DB = os.getenv('POSTGRES_DB', 'store')
POSTGRES_USER = os.getenv('POSTGRES_USER', 'postgres')
POSTGRES_PASSWORD = os.getenv('POSTGRES_PASSWORD', 'postgres')

DATABASE_URL = os.getenv(
    'DATABASE_URL',
    f"postgresql://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}",
)

# Pool sizing only applies to server databases
POOL_SIZE = int(os.getenv('DB_POOL_SIZE', '50'))
MAX_OVERFLOW = int(os.getenv('DB_MAX_OVERFLOW', '100'))
ECHO = os.getenv('DB_ECHO', 'false').lower() == 'true'


def _engine_kwargs(url: str) -> dict:
    if url.startswith('sqlite'):
        return {"connect_args": {"check_same_thread": False}, "echo": ECHO}
    return {
        "pool_size": POOL_SIZE,
        "max_overflow": MAX_OVERFLOW,
        "pool_pre_ping": True,
        "echo": ECHO,
    }


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and make sure it is closed after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
