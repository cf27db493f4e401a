"""Logout handler. Deleting a session that does not exist still succeeds."""

from src.application.commands.auth_commands import Logout
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import LoggedOut
from src.domain.protocols import EventBusProtocol, SessionStoreProtocol


class LogoutHandler:
    """Handler for Logout command."""

    def __init__(
        self,
        session_store: SessionStoreProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._session_store = session_store
        self._event_bus = event_bus

    async def handle(self, cmd: Logout) -> Result[None, DomainError]:
        match await self._session_store.get(cmd.session_id):
            case Success(value=context):
                account_id = context.account_id if context is not None else None
            case Failure(error=error):
                return Failure(error=error)

        match await self._session_store.delete(cmd.session_id):
            case Failure(error=error):
                return Failure(error=error)
            case _:
                await self._event_bus.publish(LoggedOut(account_id=account_id))
                return Success(value=None)
