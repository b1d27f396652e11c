import os
import uuid

# Point settings at a throwaway database before the app is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

from collections.abc import Generator
from datetime import date, timedelta

import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import get_db, init_db
from app.main import app
from app.models.author import Author
from app.repos.author_repo import AuthorRepository
from app.services.author_service import AuthorService
from tests.factories import make_author


@pytest.fixture
def fake() -> Faker:
    """Seeded generator so failures are reproducible."""
    generator = Faker()
    generator.seed_instance(2603)
    return generator


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine; StaticPool keeps the single connection alive."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    TestSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def author_repository(db_session: Session) -> AuthorRepository:
    return AuthorRepository(db_session)


@pytest.fixture
def author_service(author_repository: AuthorRepository) -> AuthorService:
    return AuthorService(author_repository)


@pytest.fixture
def author_list(db_session: Session, fake: Faker) -> list[Author]:
    """Five persisted authors, none with books or prizes."""
    authors = [make_author(fake) for _ in range(5)]
    db_session.add_all(authors)
    db_session.commit()
    for author in authors:
        db_session.refresh(author)
    return authors


@pytest.fixture
def past_date() -> date:
    return date.today() - timedelta(days=15)


@pytest.fixture
def future_date() -> date:
    return date.today() + timedelta(days=15)


@pytest.fixture
def test_client(db_session: Session) -> Generator[TestClient, None, None]:
    """Test client sharing the test session with the service layer."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def headers_with_correlation() -> dict[str, str]:
    """HTTP headers with correlation ID."""
    return {"X-Request-ID": str(uuid.uuid4())}
