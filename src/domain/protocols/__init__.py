"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; nothing inherits from them.
"""

from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.image_storage_protocol import ImageStorageProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.registration_repository import RegistrationRepository
from src.domain.protocols.session_store_protocol import SessionStoreProtocol
from src.domain.protocols.token_generator_protocol import TokenGeneratorProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol

__all__ = [
    "AccountRepository",
    "EmailProtocol",
    "EventBusProtocol",
    "EventHandler",
    "EventRepository",
    "ImageStorageProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RegistrationRepository",
    "SessionStoreProtocol",
    "TokenGeneratorProtocol",
    "UnitOfWorkProtocol",
]
