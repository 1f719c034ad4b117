from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.services.book_service import BookService
from typing import Annotated

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[str])
def list_categories(db: Annotated[Session, Depends(get_db)]):
    return BookService.list_categories(db)
