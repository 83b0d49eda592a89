"""Error response builder for RFC 9457 Problem Details.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from testapi.application.errors import ApplicationError, ApplicationErrorCode
from testapi.core.config import settings
from testapi.core.errors import ConflictError
from testapi.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Converts application layer errors into standardized JSON responses with
    appropriate HTTP status codes.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="User not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    _STATUS_CODES: dict[ApplicationErrorCode, int] = {
        ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
        ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
        ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
        ApplicationErrorCode.EXTERNAL_SERVICE_ERROR: status.HTTP_502_BAD_GATEWAY,
    }

    _TITLES: dict[ApplicationErrorCode, str] = {
        ApplicationErrorCode.COMMAND_EXECUTION_FAILED: "Command Execution Failed",
        ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
        ApplicationErrorCode.CONFLICT: "Resource Conflict",
        ApplicationErrorCode.EXTERNAL_SERVICE_ERROR: "External Service Error",
    }

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with ProblemDetails content
        """
        status_code = ErrorResponseBuilder._get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder._get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        # Conflicts name the field that clashed (same shape as the 409 pre-check)
        domain_error = error.domain_error
        if isinstance(domain_error, ConflictError) and domain_error.conflicting_field:
            problem.errors = [
                ErrorDetail(
                    field=domain_error.conflicting_field,
                    code=domain_error.code.value,
                    message=domain_error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def _get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(
            ...     ApplicationErrorCode.EXTERNAL_SERVICE_ERROR
            ... )
            502
        """
        return ErrorResponseBuilder._STATUS_CODES.get(
            code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @staticmethod
    def _get_title(code: ApplicationErrorCode) -> str:
        """Get human-readable title for application error code."""
        return ErrorResponseBuilder._TITLES.get(code, "Internal Server Error")
