"""Translation of failures into HTTP responses.

Every error leaving the API has the same body shape::

    {"errorCode": "PRODUCT_NOT_FOUND", "errorMessage": "Product 7 does not exist."}

Validation failures add an ``errors`` list with one entry per rejected field.
"""

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from product_catalog.api.http.schemas import ErrorResponse, FieldErrorResponse
from product_catalog.core.exceptions import CatalogError, ValidationFailedError


def error_response(
    status_code: int,
    error_code: str,
    error_message: str,
    errors: list[FieldErrorResponse] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error_code=error_code, error_message=error_message, errors=errors
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
        headers=headers,
    )


def _field_name(loc: tuple | list) -> str:
    # loc looks like ("body", "category") or ("query", "size")
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts) or "request"


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    logger.bind(error_code=exc.error_code, path=request.url.path).warning(exc.message)
    errors = None
    if isinstance(exc, ValidationFailedError):
        errors = [FieldErrorResponse(field=e.field, message=e.message) for e in exc.errors]
    return error_response(exc.status_code, exc.error_code, exc.message, errors)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        FieldErrorResponse(field=_field_name(err.get("loc", ())), message=err.get("msg", ""))
        for err in exc.errors()
    ]
    logger.bind(path=request.url.path).warning(
        "Request validation failed: {}", [e.field for e in errors]
    )
    return error_response(
        HTTPStatus.BAD_REQUEST,
        ValidationFailedError.error_code,
        "Request validation failed.",
        errors,
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.bind(path=request.url.path).opt(exception=exc).error(
        "Persistence conflict"
    )
    return error_response(
        HTTPStatus.CONFLICT,
        "PERSISTENCE_CONFLICT",
        "The request conflicts with existing data.",
    )


async def persistence_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    logger.bind(path=request.url.path).opt(exception=exc).error("Persistence failure")
    return error_response(
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "PERSISTENCE_FAILURE",
        "A storage error occurred. Please try again later.",
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    try:
        error_code = HTTPStatus(exc.status_code).name
    except ValueError:
        error_code = "HTTP_ERROR"
    return error_response(
        exc.status_code,
        error_code,
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the shared error translation on ``app``."""
    app.add_exception_handler(CatalogError, catalog_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, integrity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, persistence_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
