"""ImageStorageProtocol - port for event image assets."""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


class ImageStorageProtocol(Protocol):
    """Image storage protocol (port).

    Implementations:
        - LocalImageStorage: src/infrastructure/storage/local_image_storage.py
    """

    async def release(self, image_url: str) -> Result[bool, DomainError]:
        """Release the asset behind ``image_url``.

        URLs the store does not own are ignored.

        Returns:
            Success(True) if an asset was removed, Success(False) if there was
            nothing to remove, Failure on storage errors.
        """
        ...
