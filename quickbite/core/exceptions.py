"""
Exception handlers that translate framework errors into API responses.
"""
from typing import Any, Iterable
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from quickbite.schemas.menu_item import FieldError, ValidationErrorResponse

logger = logging.getLogger(__name__)

# Request sections that only add noise to a field path.
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def collect_field_errors(errors: Iterable[dict[str, Any]]) -> list[FieldError]:
    """
    Flatten pydantic error dicts into one FieldError per failing field.

    ``("body", "price")`` becomes ``"price"``; nested locations are joined
    with dots. An error on the whole body is reported under ``"body"``.
    """
    field_errors: list[FieldError] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        field_errors.append(FieldError(field=field, message=error.get("msg", "Invalid value")))
    return field_errors


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    field_errors = collect_field_errors(exc.errors())
    logger.warning(
        "Validation failed for %s %s: %s",
        request.method,
        request.url.path,
        ", ".join(error.field for error in field_errors),
    )
    body = ValidationErrorResponse(errors=field_errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(body),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the API's exception handlers to *app*."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
