"""Exception handlers translating application errors into HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recommendations_backend.utils.errors import AppError, wrong_schema_error
from recommendations_backend.utils.logging import get_logger, log_structured


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    log_structured(
        get_logger(),
        "request_rejected",
        method=request.method,
        path=request.url.path,
        **exc.to_extra(),
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = wrong_schema_error("; ".join(_describe(item) for item in exc.errors()))
    return await app_error_handler(request, error)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    get_logger().exception(
        "request_failed",
        extra={"method": request.method, "path": request.url.path, "error": str(exc)},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def _describe(error: dict[str, object]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error.get('msg')}" if location else str(error.get("msg"))


__all__ = ["register_error_handlers"]
