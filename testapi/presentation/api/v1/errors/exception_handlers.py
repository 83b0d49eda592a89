"""Global exception handlers for FastAPI application.

Converts exceptions to RFC 9457 Problem Details responses.

Handlers:
    http_exception_handler: HTTPException -> problem details
    validation_exception_handler: RequestValidationError -> 422 with field errors
    user_already_exists_handler: UserAlreadyExistsError -> 409
    generic_exception_handler: anything else -> 500 (no internals leaked)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from testapi.core.config import settings
from testapi.core.container import get_logger
from testapi.domain.errors import UserAlreadyExistsError
from testapi.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# Numeric on purpose: Starlette renamed the 422 constant
HTTP_422_UNPROCESSABLE = 422

# HTTP status code to (title, slug) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    502: ("Bad Gateway", "bad-gateway"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _get_status_title(status_code: int) -> str:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def _get_error_slug(status_code: int) -> str:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


def _trace_id(request: Request) -> str | None:
    """Trace id stored on request.state by TraceMiddleware."""
    return getattr(request.state, "trace_id", None)


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to Problem Details response.

    Also covers Starlette's own 404/405 for unknown routes and methods.
    """
    assert isinstance(exc, StarletteHTTPException)

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{_get_error_slug(exc.status_code)}",
        title=_get_status_title(exc.status_code),
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=_trace_id(request),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to Problem Details with field errors.

    Example:
        >>> # GET /users?userType=Pilot&application=VideoWeb
        >>> # {
        >>> #   "title": "Validation Failed",
        >>> #   "status": 422,
        >>> #   "errors": [{"field": "query.userType", "code": "enum", ...}],
        >>> #   ...
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p != "body"]
        field_name = ".".join(field_parts) if field_parts else "unknown"

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
        status=HTTP_422_UNPROCESSABLE,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors if field_errors else None,
        trace_id=_trace_id(request),
    )

    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content=problem.model_dump(exclude_none=True),
    )


async def user_already_exists_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert UserAlreadyExistsError to a 409 Problem Details response."""
    assert isinstance(exc, UserAlreadyExistsError)

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/conflict",
        title="Resource Conflict",
        status=status.HTTP_409_CONFLICT,
        detail=str(exc),
        instance=str(request.url.path),
        errors=[
            ErrorDetail(
                field="username",
                code="user_already_exists",
                message=str(exc),
            )
        ],
        trace_id=_trace_id(request),
    )

    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and returns a 500 without stack traces or internal
    details.
    """
    trace_id = _trace_id(request)

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
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(UserAlreadyExistsError, user_already_exists_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
