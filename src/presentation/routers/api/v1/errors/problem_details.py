"""RFC 9457 Problem Details for HTTP APIs.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

The standard members are extended with ``code`` (the machine-readable
ErrorCode value clients branch on) and ``trace_id``.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Used for validation errors where multiple fields may have errors.
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details response body.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation, shown to end users verbatim
        instance: URI reference identifying the specific occurrence
        code: Machine-readable reason (e.g. ``event_full``)
        errors: Optional list of field-specific errors
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/event_full",
        ...     title="Bad Request",
        ...     status=400,
        ...     detail="Event is full",
        ...     instance="/api/v1/registrations",
        ...     code="event_full",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/event_full"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Bad Request"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Event is full"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/registrations"],
    )
    code: str | None = Field(
        None,
        description="Machine-readable error code",
        examples=["event_full"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
