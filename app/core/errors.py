from collections.abc import Mapping, Sequence
from typing import Any
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from app.core.logging import get_logger


class BookNotFoundError(LookupError):
    """No book row matches the requested id."""

    def __init__(self, book_id: int):
        super().__init__("book not found")
        self.book_id: int = book_id


class MissingKeywordError(ValueError):
    """Search was called without a keyword."""


class ErrorBody(BaseModel):
    """Error response body."""
    error: str


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorBody(error=message).model_dump()
    )


def _format_validation_errors(errors: Sequence[Mapping[Any, Any]]) -> str:
    """Flatten validation errors into one `loc: msg` message."""

    parts: list[str] = []

    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ()))
        msg = str(error.get("msg", "invalid value"))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid request"


def _storage_message(exc: SQLAlchemyError) -> str:
    """Underlying driver message when there is one."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register centralized exception."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.warning("HTTP error %d: %s", exc.status_code, exc.detail)
        return _error_response(exc.status_code, str(exc.detail or "HTTP error"))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.info("Validation error")
        return _error_response(
            HTTP_400_BAD_REQUEST, _format_validation_errors(exc.errors())
        )

    @app.exception_handler(BookNotFoundError)
    async def not_found_handler(
        request: Request, exc: BookNotFoundError
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.info("Book %d not found", exc.book_id)
        return _error_response(HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(MissingKeywordError)
    async def missing_keyword_handler(
        request: Request, exc: MissingKeywordError
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.info("Search without keyword")
        return _error_response(HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.error("Database error: %s", _storage_message(exc))
        return _error_response(HTTP_500_INTERNAL_SERVER_ERROR, _storage_message(exc))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.exception("Unhandled server error", exc_info=exc)
        return _error_response(HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
