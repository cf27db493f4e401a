"""Infrastructure-specific error codes.

Internal codes for tracking infrastructure failures. They travel alongside
the client-facing ErrorCode on InfrastructureError.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Database errors
    DATABASE_CONSTRAINT_VIOLATION = "database_constraint_violation"
    DATABASE_ERROR = "database_error"

    # Session store (Redis) errors
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"

    # External service errors
    EXTERNAL_SERVICE_UNAVAILABLE = "external_service_unavailable"
    EXTERNAL_SERVICE_ERROR = "external_service_error"

    # Local resources
    QR_ENCODING_FAILED = "qr_encoding_failed"
    FILE_SYSTEM_ERROR = "file_system_error"
