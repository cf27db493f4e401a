"""Mapping of SQLAlchemy integrity failures to domain errors."""

from sqlalchemy.exc import IntegrityError

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import DatabaseError


def is_unique_violation(error: IntegrityError) -> bool:
    """True if the integrity error came from a unique index or constraint.

    PostgreSQL reports "duplicate key value violates unique constraint",
    SQLite reports "UNIQUE constraint failed".
    """
    return "unique" in str(error.orig).lower()


def map_integrity_error(
    error: IntegrityError,
    *,
    conflict: ConflictError,
) -> DomainError:
    """Return ``conflict`` for unique violations, a DatabaseError otherwise."""
    if is_unique_violation(error):
        return conflict
    return DatabaseError(
        code=ErrorCode.DATABASE_ERROR,
        message="A database constraint was violated",
        infrastructure_code=InfrastructureErrorCode.DATABASE_CONSTRAINT_VIOLATION,
        details={"constraint_error": type(error.orig).__name__},
    )
