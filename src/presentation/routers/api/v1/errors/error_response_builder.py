"""Error response builder for RFC 9457 Problem Details.

Routers hand the ``DomainError`` carried by a ``Failure`` to
``ErrorResponseBuilder.from_domain_error``; the concrete error class picks
the HTTP status.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    ExpiredError,
    NotFoundError,
    ValidationError,
)
from src.infrastructure.errors import (
    CacheError,
    DatabaseError,
    ExternalServiceError,
    TokenGenerationError,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# Order matters: first matching class wins.
_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (ExpiredError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (ExternalServiceError, status.HTTP_502_BAD_GATEWAY),
    (CacheError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (TokenGenerationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (DatabaseError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)

_TITLES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_401_UNAUTHORIZED: "Authentication Required",
    status.HTTP_403_FORBIDDEN: "Access Denied",
    status.HTTP_404_NOT_FOUND: "Resource Not Found",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
    status.HTTP_502_BAD_GATEWAY: "Bad Gateway",
    status.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
}

_HIDDEN_DETAIL = "An unexpected error occurred. Please contact support with the trace ID."


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> match result:
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(
        ...             error=error,
        ...             request=request,
        ...             trace_id=get_trace_id() or "",
        ...         )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 9457 JSON response.

        Storage and token rendering faults keep their code but hide the
        message, which may carry driver output.

        Args:
            error: Error taken from a ``Failure``.
            request: Current request (for the instance path).
            trace_id: Request trace ID.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error)
        hide_detail = status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=_TITLES.get(status_code, "Error"),
            status=status_code,
            detail=_HIDDEN_DETAIL if hide_detail else error.message,
            instance=str(request.url.path),
            code=error.code.value,
            trace_id=trace_id,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(error: DomainError) -> int:
        """Map an error instance to its HTTP status (500 if unmapped)."""
        for error_type, status_code in _STATUS_BY_ERROR:
            if isinstance(error, error_type):
                return status_code
        return status.HTTP_500_INTERNAL_SERVER_ERROR
