"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming. The value of each member is
what clients see in the ``code`` field of a problem-details response, so
values are stable once published.

Categories:
- Validation errors (VALIDATION_*, *_INVALID)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, EMAIL_NOT_VERIFIED)
- Authorization errors (PERMISSION_DENIED, RESOURCE_NOT_OWNED)
- Business rule violations (EVENT_FULL, OTP_*, ALREADY_CHECKED_IN)
- Upstream and infrastructure failures
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    TOKEN_INVALID = "token_invalid"

    # Resource errors
    ACCOUNT_NOT_FOUND = "account_not_found"
    EVENT_NOT_FOUND = "event_not_found"
    REGISTRATION_NOT_FOUND = "registration_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    REGISTRATION_ALREADY_EXISTS = "registration_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    AUTHENTICATION_REQUIRED = "authentication_required"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_NOT_OWNED = "resource_not_owned"

    # Business rule violations
    ACCOUNT_ALREADY_VERIFIED = "account_already_verified"
    OTP_INVALID = "otp_invalid"
    OTP_EXPIRED = "otp_expired"
    EVENT_FULL = "event_full"
    ALREADY_CHECKED_IN = "already_checked_in"

    # Upstream / infrastructure errors
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"
    IMAGE_STORAGE_FAILED = "image_storage_failed"
    TOKEN_GENERATION_FAILED = "token_generation_failed"
    SESSION_STORE_FAILED = "session_store_failed"
    DATABASE_ERROR = "database_error"
