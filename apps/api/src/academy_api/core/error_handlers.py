"""
Exception Handlers

Registered on the app in main.py so that every error response is a flat JSON
object: {"success": false, "error": ..., "message": ..., ["errors"], ["reason"]}.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def format_validation_errors(errors: list[dict]) -> list[str]:
    """Turn pydantic error dicts into "field: message" strings."""
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        message = error.get("msg", "Invalid value")
        formatted.append(f"{field}: {message}" if field else message)
    return formatted


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Flatten HTTPException details into the response body."""
    if isinstance(exc.detail, dict):
        content = {"success": False, **exc.detail}
    else:
        content = {"success": False, "error": "HTTP_ERROR", "message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body/query validation failures are client errors (400)."""
    errors = format_validation_errors(exc.errors())
    logger.warning(f"Request validation failed: path={request.url.path}, fields={len(errors)}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": "VALIDATION_FAILED",
            "message": "Validation failed",
            "errors": errors,
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything a router did not convert."""
    logger.exception(f"Unhandled error: path={request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
