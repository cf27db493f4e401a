"""Base error class for railway-oriented error handling.

DomainError is the base class for ALL application errors. Errors flow through
handlers as data inside ``Failure``; they are never raised.

Architecture:
- Base class for all error types (core, domain, infrastructure)
- Does NOT inherit from Exception
- Subclassed with dataclass inheritance
- The presentation layer maps the concrete subclass to an HTTP status

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable message, shown to end users verbatim.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
