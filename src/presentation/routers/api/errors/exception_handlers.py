"""Global exception handlers for FastAPI application.

Catch exceptions that escape the routers and convert them to RFC 7807
Problem Details responses.

Handlers:
    http_exception_handler: Converts HTTPException to Problem Details
    validation_exception_handler: Converts RequestValidationError to Problem Details
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from typing import cast

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code to (title, slug) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}

# Request sections FastAPI prefixes to validation error locations
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _get_status_title(status_code: int) -> str:
    """Get human-readable title for HTTP status code."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def _get_error_slug(status_code: int) -> str:
    """Get kebab-case error slug for the Problem Details type URL."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to a Problem Details response.

    Covers errors raised by dependencies (missing bearer token) and by
    routing (404 for unknown paths, 405 for wrong methods).

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by handler or dependency.

    Returns:
        JSONResponse with ProblemDetails.
    """
    # FastAPI registers this handler only for HTTPException
    http_exc = cast(HTTPException, exc)

    status_code = http_exc.status_code
    detail = http_exc.detail

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{_get_error_slug(status_code)}",
        title=_get_status_title(status_code),
        status=status_code,
        detail=detail if isinstance(detail, str) else str(detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=getattr(request.state, "trace_id", None),
    )

    # Preserve any headers from HTTPException (e.g., WWW-Authenticate)
    headers = getattr(http_exc, "headers", None)

    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 Problem Details response.

    Each Pydantic error becomes one ErrorDetail keyed by the wire field
    name, e.g. ``{"field": "password", "code": "value_error", ...}``.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with ProblemDetails including field errors.
    """
    # FastAPI registers this handler only for RequestValidationError
    validation_exc = cast(RequestValidationError, exc)

    field_errors: list[ErrorDetail] = []
    for error in validation_exc.errors():
        # ["body", "firstName"] -> "firstName"
        loc = list(error.get("loc", []))
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field_name = ".".join(str(p) for p in loc) if loc else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation-failed",
        title="Validation Failed",
        status=status.HTTP_400_BAD_REQUEST,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors if field_errors else None,
        trace_id=getattr(request.state, "trace_id", None),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and returns a 500 without internal details.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse with ProblemDetails (500 Internal Server Error)
    """
    trace_id = getattr(request.state, "trace_id", None)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
