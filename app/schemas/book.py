from pydantic import BaseModel, ConfigDict
from typing import ClassVar
from datetime import datetime

# Book write schema (create/update body); id and timestamps are ignored
class BookWrite(BaseModel):
    title: str
    author: str
    isbn: str
    year: int
    price: float

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")


# Projections. Each schema doubles as the column list its query selects,
# so the fields must be named after `books` columns.

class BookBrief(BaseModel):
    """Single-book lookup."""
    id: int
    title: str
    author: str


class BookListing(BaseModel):
    """Catalog listing and search results."""
    id: int
    title: str
    author: str
    category: str | None = None
    isbn: str
    year: int
    price: float
    created_at: datetime
    updated_at: datetime


class NewBook(BaseModel):
    """Newest arrivals; carries no category."""
    id: int
    title: str
    author: str
    isbn: str
    year: int
    price: float
    created_at: datetime
    updated_at: datetime


class FeaturedBook(BookListing):
    rating: float


class DiscountedBook(BookListing):
    discount: int
    rating: float


# Write results
class BookCreated(BookWrite):
    id: int
    created_at: datetime
    updated_at: datetime


class BookUpdated(BookWrite):
    id: int
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
