from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.services.book_service import BookService
from app.schemas.book import (
    BookBrief,
    BookCreated,
    BookListing,
    BookUpdated,
    BookWrite,
    DiscountedBook,
    FeaturedBook,
    MessageResponse,
    NewBook,
)
from app.core.logging import get_logger
from typing import Annotated
from starlette.status import HTTP_201_CREATED
router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=list[BookListing])
def list_books(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    category: Annotated[str | None, Query()] = None,
):
    logger = get_logger(__name__, request)
    logger.info("Listing books (category=%s)", category or "*")
    return BookService.list_books(db, category=category)


# Static paths go before /{book_id}
@router.get("/new", response_model=list[NewBook])
def list_new_books(db: Annotated[Session, Depends(get_db)]):
    return BookService.list_new_books(db)


@router.get("/search", response_model=list[BookListing])
def search_books(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    keyword: Annotated[str | None, Query()] = None,
):
    logger = get_logger(__name__, request)
    logger.info("Searching books (keyword=%r)", keyword)
    return BookService.search_books(db, keyword)


@router.get("/featured", response_model=list[FeaturedBook])
def list_featured_books(db: Annotated[Session, Depends(get_db)]):
    return BookService.list_featured_books(db)


@router.get("/discounted", response_model=list[DiscountedBook])
def list_discounted_books(db: Annotated[Session, Depends(get_db)]):
    return BookService.list_discounted_books(db)


@router.get("/{book_id}", response_model=BookBrief)
def get_book(book_id: int, db: Annotated[Session, Depends(get_db)]):
    return BookService.get_book(db, book_id)


@router.post("", response_model=BookCreated, status_code=HTTP_201_CREATED)
def create_book(
    request: Request,
    data: BookWrite,
    db: Annotated[Session, Depends(get_db)],
):
    book = BookService.create_book(db, data)
    get_logger(__name__, request).info("Created book %d", book.id)
    return book


@router.put("/{book_id}", response_model=BookUpdated)
def update_book(
    request: Request,
    book_id: int,
    data: BookWrite,
    db: Annotated[Session, Depends(get_db)],
):
    book = BookService.update_book(db, book_id, data)
    get_logger(__name__, request).info("Updated book %d", book_id)
    return book


@router.delete("/{book_id}", response_model=MessageResponse)
def delete_book(
    request: Request,
    book_id: int,
    db: Annotated[Session, Depends(get_db)],
):
    BookService.delete_book(db, book_id)
    get_logger(__name__, request).info("Deleted book %d", book_id)
    return MessageResponse(message="book deleted successfully")
