"""RFC 9457 Problem Details for HTTP APIs.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> error = ErrorDetail(
        ...     field="user_type",
        ...     code="enum",
        ...     message="Input should be 'Judge', 'VideoHearingsOfficer', ...",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="User 01928f6e-3b7a-7c8d-9e0f-1a2b3c4d5e6f not found",
        ...     instance="/users/01928f6e-3b7a-7c8d-9e0f-1a2b3c4d5e6f",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[404])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/users"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
