from __future__ import annotations
from sqlalchemy import Column, Engine, delete, insert, or_, select, text, update
from sqlalchemy.orm import Session
from pydantic import BaseModel
from app.models.book import Book
from app.schemas.book import (
    BookBrief,
    BookCreated,
    BookListing,
    BookUpdated,
    BookWrite,
    DiscountedBook,
    FeaturedBook,
    NewBook,
)

TOP_N = 5


def _columns(schema: type[BaseModel]) -> list[Column[object]]:
    """Columns of `books` backing the fields of a projection schema."""
    return [Book.__table__.c[name] for name in schema.model_fields]


class BookRepository:
    @staticmethod
    # List books, optionally filtered by exact category
    def list(db: Session, category: str | None = None) -> list[BookListing]:
        stmt = select(*_columns(BookListing))
        if category:
            stmt = stmt.where(Book.category == category)
        return [BookListing(**row) for row in db.execute(stmt).mappings()]

    @staticmethod
    # Most recently created books
    def list_newest(db: Session) -> list[NewBook]:
        stmt = (
            select(*_columns(NewBook))
            .order_by(Book.created_at.desc())
            .limit(TOP_N)
        )
        return [NewBook(**row) for row in db.execute(stmt).mappings()]

    @staticmethod
    # Get a book by ID
    def get(db: Session, book_id: int) -> BookBrief | None:
        stmt = select(*_columns(BookBrief)).where(Book.id == book_id)
        row = db.execute(stmt).mappings().first()
        return BookBrief(**row) if row is not None else None

    @staticmethod
    # Create a new book
    def create(db: Session, data: BookWrite) -> BookCreated:
        stmt = (
            insert(Book)
            .values(**data.model_dump())
            .returning(Book.id, Book.created_at, Book.updated_at)
        )
        row = db.execute(stmt).mappings().one()
        db.commit()
        return BookCreated(**data.model_dump(), **row)

    @staticmethod
    # Overwrite the writable fields of a book
    def update(db: Session, book_id: int, data: BookWrite) -> BookUpdated | None:
        stmt = (
            update(Book)
            .where(Book.id == book_id)
            .values(**data.model_dump())
            .returning(Book.id, Book.updated_at)
        )
        row = db.execute(stmt).mappings().first()
        if row is None:
            db.rollback()
            return None
        db.commit()
        return BookUpdated(**data.model_dump(), **row)

    @staticmethod
    # Delete a book, returns the number of rows removed
    def delete(db: Session, book_id: int) -> int:
        result = db.execute(delete(Book).where(Book.id == book_id))
        db.commit()
        return result.rowcount

    @staticmethod
    # Distinct non-null categories
    def list_categories(db: Session) -> list[str]:
        stmt = select(Book.category).where(Book.category.is_not(None)).distinct()
        return list(db.scalars(stmt).all())

    @staticmethod
    # Case-insensitive substring search on title, author, category and isbn
    def search(db: Session, keyword: str) -> list[BookListing]:
        pattern = f"%{keyword}%"
        stmt = select(*_columns(BookListing)).where(
            or_(
                Book.title.ilike(pattern),
                Book.author.ilike(pattern),
                Book.category.ilike(pattern),
                Book.isbn.ilike(pattern),
            )
        )
        return [BookListing(**row) for row in db.execute(stmt).mappings()]

    @staticmethod
    # Highest rated books
    def list_featured(db: Session) -> list[FeaturedBook]:
        stmt = (
            select(*_columns(FeaturedBook))
            .order_by(Book.rating.desc())
            .limit(TOP_N)
        )
        return [FeaturedBook(**row) for row in db.execute(stmt).mappings()]

    @staticmethod
    # Largest discounts
    def list_discounted(db: Session) -> list[DiscountedBook]:
        stmt = (
            select(*_columns(DiscountedBook))
            .order_by(Book.discount.desc())
            .limit(TOP_N)
        )
        return [DiscountedBook(**row) for row in db.execute(stmt).mappings()]

    @staticmethod
    # Round trip to the store, raises when it is unreachable
    def ping(engine: Engine) -> None:
        with engine.connect() as conn:
            _ = conn.execute(text("SELECT 1"))
