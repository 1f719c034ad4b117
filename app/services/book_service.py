from __future__ import annotations
from sqlalchemy import Engine
from sqlalchemy.orm import Session
from app.core.errors import BookNotFoundError, MissingKeywordError
from app.repos.book_repo import BookRepository
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


class BookService:
    @staticmethod
    # List books
    def list_books(db: Session, category: str | None = None) -> list[BookListing]:
        return BookRepository.list(db, category=category)

    @staticmethod
    # Newest books
    def list_new_books(db: Session) -> list[NewBook]:
        return BookRepository.list_newest(db)

    @staticmethod
    # Get book
    def get_book(db: Session, book_id: int) -> BookBrief:
        book = BookRepository.get(db, book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    @staticmethod
    # Create book
    def create_book(db: Session, data: BookWrite) -> BookCreated:
        return BookRepository.create(db, data)

    @staticmethod
    # Update book
    def update_book(db: Session, book_id: int, data: BookWrite) -> BookUpdated:
        book = BookRepository.update(db, book_id, data)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    @staticmethod
    # Delete book
    def delete_book(db: Session, book_id: int) -> None:
        if BookRepository.delete(db, book_id) == 0:
            raise BookNotFoundError(book_id)

    @staticmethod
    # List categories
    def list_categories(db: Session) -> list[str]:
        return BookRepository.list_categories(db)

    @staticmethod
    # Search books
    def search_books(db: Session, keyword: str | None) -> list[BookListing]:
        if not keyword:
            raise MissingKeywordError("keyword is required")
        return BookRepository.search(db, keyword)

    @staticmethod
    # Featured books
    def list_featured_books(db: Session) -> list[FeaturedBook]:
        return BookRepository.list_featured(db)

    @staticmethod
    # Discounted books
    def list_discounted_books(db: Session) -> list[DiscountedBook]:
        return BookRepository.list_discounted(db)

    @staticmethod
    # Store reachability
    def check_health(engine: Engine) -> None:
        BookRepository.ping(engine)
