"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_register_for_event_handler

The container is organized into modules:
- infrastructure: Core services (db, logging, email, QR, storage, sessions)
- events: Event bus and subscriptions
- auth_handlers: Sign-up, OTP, login and logout handler factories
- event_handlers: Event catalog handler factories
- registration_handlers: Registration ledger handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_email_service,
    get_image_storage,
    get_logger,
    get_notification_dispatcher,
    get_password_service,
    get_redis,
    get_session_store,
    get_token_generator,
)

# Event bus
from src.core.container.events import get_event_bus

# Auth handlers
from src.core.container.auth_handlers import (
    get_login_handler,
    get_logout_handler,
    get_register_account_handler,
    get_resend_otp_handler,
    get_verify_otp_handler,
)

# Event catalog handlers
from src.core.container.event_handlers import (
    get_create_event_handler,
    get_delete_event_handler,
    get_get_event_handler,
    get_is_event_organiser_handler,
    get_list_events_handler,
    get_update_event_handler,
)

# Registration handlers
from src.core.container.registration_handlers import (
    get_cancel_registration_handler,
    get_check_in_attendee_handler,
    get_check_registration_handler,
    get_get_registration_handler,
    get_list_my_registrations_handler,
    get_register_for_event_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_image_storage",
    "get_logger",
    "get_notification_dispatcher",
    "get_password_service",
    "get_redis",
    "get_session_store",
    "get_token_generator",
    # Events
    "get_event_bus",
    # Auth handlers
    "get_login_handler",
    "get_logout_handler",
    "get_register_account_handler",
    "get_resend_otp_handler",
    "get_verify_otp_handler",
    # Event catalog handlers
    "get_create_event_handler",
    "get_delete_event_handler",
    "get_get_event_handler",
    "get_is_event_organiser_handler",
    "get_list_events_handler",
    "get_update_event_handler",
    # Registration handlers
    "get_cancel_registration_handler",
    "get_check_in_attendee_handler",
    "get_check_registration_handler",
    "get_get_registration_handler",
    "get_list_my_registrations_handler",
    "get_register_for_event_handler",
]
