"""Infrastructure errors package.

Usage:
    from src.infrastructure.errors import DatabaseError, ExternalServiceError
"""

from src.infrastructure.errors.infrastructure_error import (
    CacheError,
    DatabaseError,
    ExternalServiceError,
    InfrastructureError,
    TokenGenerationError,
)

__all__ = [
    "InfrastructureError",
    "DatabaseError",
    "CacheError",
    "ExternalServiceError",
    "TokenGenerationError",
]
