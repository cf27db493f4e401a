"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (database,
Redis, SMTP, file system, QR encoder).

Architecture:
- Adapters catch library exceptions and return these as ``Failure``
- They inherit from DomainError (not Exception)
- ``code`` is the client-facing ErrorCode, ``infrastructure_code`` the
  internal one
"""

from dataclasses import dataclass

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        infrastructure_code: Original infrastructure error code.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(InfrastructureError):
    """Database failure (wraps SQLAlchemy exceptions)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Session store (Redis) failure."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalServiceError(InfrastructureError):
    """External service failure (SMTP relay, image storage).

    Attributes:
        service_name: Name of the external service.
    """

    service_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenGenerationError(InfrastructureError):
    """Registration token could not be rendered."""

    pass
