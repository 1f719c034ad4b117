from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import HTTP_200_OK, HTTP_503_SERVICE_UNAVAILABLE
from typing import Annotated

from app.core.logging import get_logger
from app.db.session import get_engine
from app.services.book_service import BookService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(request: Request, engine: Annotated[Engine, Depends(get_engine)]) -> JSONResponse:
    """Liveness check that pings the database."""
    try:
        BookService.check_health(engine)
    except SQLAlchemyError as e:
        get_logger(__name__, request).warning("Database unreachable: %s", e)
        return JSONResponse(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            content={"message": "unhealty", "error": str(e)},
        )
    return JSONResponse(status_code=HTTP_200_OK, content={"message": "healthy"})
