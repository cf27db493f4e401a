"""Fire-and-forget registration confirmation emails.

The confirmation email is sent after the registration has been committed,
on a detached asyncio task. Its outcome never changes the HTTP result:
delivery failures are logged by the task itself and crashes are logged by a
done-callback.

The dispatcher keeps a strong reference to every pending task (the event
loop only keeps weak ones) and can ``drain()`` them on shutdown.
"""

import asyncio
from uuid import UUID

from src.core.result import Failure
from src.domain.entities import Event, Registration
from src.domain.protocols import EmailProtocol, LoggerProtocol
from src.domain.value_objects import AuthContext


class NotificationDispatcher:
    """Schedules confirmation emails on background tasks.

    Example:
        >>> dispatcher = NotificationDispatcher(email_service, logger)
        >>> dispatcher.dispatch_confirmation(auth, event, registration)
        >>> await dispatcher.drain()  # on shutdown
    """

    def __init__(self, email_service: EmailProtocol, logger: LoggerProtocol) -> None:
        self._email_service = email_service
        self._logger = logger
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def dispatch_confirmation(
        self,
        auth: AuthContext,
        event: Event,
        registration: Registration,
    ) -> asyncio.Task[None]:
        """Start sending the confirmation email and return immediately."""
        task = asyncio.create_task(
            self._send_confirmation(auth, event, registration),
            name=registration_task_name(registration.id),
        )
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    async def drain(self, timeout: float | None = None) -> None:
        """Wait for pending notifications, cancelling any still running."""
        if not self._tasks:
            return
        _, still_pending = await asyncio.wait(set(self._tasks), timeout=timeout)
        for task in still_pending:
            task.cancel()
        if still_pending:
            self._logger.warning(
                "notifications_cancelled_on_shutdown", count=len(still_pending)
            )

    async def _send_confirmation(
        self,
        auth: AuthContext,
        event: Event,
        registration: Registration,
    ) -> None:
        result = await self._email_service.send_registration_confirmation(
            to_email=auth.email,
            name=auth.name,
            event_title=event.title,
            event_date=event.date.strftime("%A, %B %d, %Y"),
            event_time=event.time,
            event_venue=event.venue,
            qr_code_data_url=registration.qr_code,
        )
        match result:
            case Failure(error=error):
                self._logger.warning(
                    "confirmation_email_failed",
                    registration_id=str(registration.id),
                    error_code=error.code.value,
                    error_message=error.message,
                )
            case _:
                self._logger.info(
                    "confirmation_email_sent",
                    registration_id=str(registration.id),
                )

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._logger.error(
                "confirmation_email_crashed",
                error=exc if isinstance(exc, Exception) else None,
                task=task.get_name(),
            )


def registration_task_name(registration_id: UUID) -> str:
    return f"confirmation-email-{registration_id}"
