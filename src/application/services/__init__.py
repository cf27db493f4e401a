"""Application services shared by several command handlers."""

from src.application.services.notification_dispatcher import NotificationDispatcher
from src.application.services.otp_service import OtpService

__all__ = ["NotificationDispatcher", "OtpService"]
