import pytest
import uuid
from datetime import datetime, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.main import create_app
from app.models.base import Base
from app.models.book import Book

# In-memory database shared by every connection of the pool
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def test_engine():
    """Fresh in-memory database with the books table for each test."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_app(test_engine):
    """Application wired to the test engine."""
    return create_app(engine=test_engine)


@pytest.fixture
def test_client(test_app):
    """Create a test client for FastAPI app."""
    return TestClient(test_app)


@pytest.fixture
def db_session(test_engine):
    """Create a fresh database session for each test."""
    session = sessionmaker(bind=test_engine, autocommit=False, autoflush=False, future=True)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def book_payload():
    """Valid create/update body with a unique isbn."""
    unique_suffix = uuid.uuid4().hex[:8]
    return {
        "title": f"Test Book {unique_suffix}",
        "author": "Test Author",
        "isbn": f"978-{unique_suffix}",
        "year": 2023,
        "price": 29.99,
    }


@pytest.fixture
def sample_book(test_client, book_payload):
    """Create a sample book through the API."""
    response = test_client.post("/api/v1/books", json=book_payload)

    assert response.status_code == 201, f"Failed to create sample book: {response.text}"
    return response.json()


@pytest.fixture
def make_book(db_session):
    """
    Insert a book directly, including fields the API does not write
    (category, rating, discount, explicit timestamps).
    """
    counter = {"n": 0}
    base_time = datetime(2024, 1, 1, 12, 0, 0)

    def _make(**overrides) -> Book:
        counter["n"] += 1
        n = counter["n"]
        created = base_time + timedelta(minutes=n)
        fields = {
            "title": f"Book {n}",
            "author": f"Author {n}",
            "isbn": f"isbn-{n:04d}",
            "year": 2000 + n,
            "price": 10.0 + n,
            "created_at": created,
            "updated_at": created,
        }
        fields.update(overrides)
        book = Book(**fields)
        db_session.add(book)
        db_session.commit()
        db_session.refresh(book)
        return book

    return _make


@pytest.fixture
def headers_with_correlation():
    """HTTP headers with correlation ID."""
    return {"X-Request-ID": str(uuid.uuid4())}
