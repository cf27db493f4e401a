"""TokenGeneratorProtocol - port for registration token rendering.

Turns a RegistrationTokenPayload into a scannable image. Generation runs
before any registration write, so a failure here leaves no trace.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.value_objects.registration_token_payload import (
    RegistrationTokenPayload,
)


class TokenGeneratorProtocol(Protocol):
    """Token generator protocol (port).

    Implementations:
        - QrTokenGenerator: src/infrastructure/tokens/qr_token_generator.py
    """

    async def generate(
        self, payload: RegistrationTokenPayload
    ) -> Result[str, DomainError]:
        """Render the payload.

        Returns:
            Success with an image data URL, or Failure(TokenGenerationError)
            when the payload cannot be encoded.
        """
        ...
