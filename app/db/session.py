from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from collections.abc import Generator
from app.core.config import settings
from app.models.base import Base


def build_engine(url: str) -> Engine:
    """Create an engine; SQLite connections may be shared across threads."""
    connect_args: dict[str, object] = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db(bind: Engine = engine) -> None:
    """Create the authors/books/prizes tables if missing."""
    import app.models  # noqa: F401  registers Author, Book, Prize

    Base.metadata.create_all(bind=bind)


# Get a database session scoped to one request.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
