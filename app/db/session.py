from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from collections.abc import Generator
from fastapi import Request
from app.core.config import Settings


def build_engine(settings: Settings) -> Engine:
    """
    Engine with the bounded connection pool.
    SQLite URLs (tests, local runs) keep the dialect's own pool.
    """
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        return create_engine(url, future=True)

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
        future=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


# Get a database session from the application's session factory.
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    One session per request, closed on every exit path.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_engine(request: Request) -> Engine:
    return request.app.state.engine
