"""Local file system image storage.

Event images uploaded to this deployment live under ``media_root`` and are
served from ``media_url_prefix``. Releasing an image deletes the file; URLs
pointing anywhere else (external hosts, other prefixes) are left alone.
"""

import asyncio
from pathlib import Path
from urllib.parse import urlparse

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import ExternalServiceError


class LocalImageStorage:
    """ImageStorageProtocol implementation over a local directory."""

    def __init__(
        self,
        media_root: str | Path,
        media_url_prefix: str,
        logger: LoggerProtocol,
    ) -> None:
        self._root = Path(media_root).resolve()
        self._prefix = "/" + media_url_prefix.strip("/") + "/"
        self._logger = logger

    def resolve(self, image_url: str) -> Path | None:
        """Map an image URL to a file under media_root.

        Returns:
            The file path, or None if the URL is not owned by this store
            (including paths that would escape media_root).
        """
        parsed = urlparse(image_url)
        if parsed.netloc or not parsed.path.startswith(self._prefix):
            return None
        relative = parsed.path.removeprefix(self._prefix)
        if not relative:
            return None
        candidate = (self._root / relative).resolve()
        if not candidate.is_relative_to(self._root):
            return None
        return candidate

    async def release(self, image_url: str) -> Result[bool, DomainError]:
        path = self.resolve(image_url)
        if path is None:
            return Success(value=False)

        try:
            removed = await asyncio.to_thread(self._unlink, path)
        except OSError as e:
            self._logger.warning(
                "event_image_release_failed",
                image_url=image_url,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.IMAGE_STORAGE_FAILED,
                    message="Event image could not be removed",
                    infrastructure_code=InfrastructureErrorCode.FILE_SYSTEM_ERROR,
                    service_name="local_image_storage",
                )
            )

        if removed:
            self._logger.info("event_image_released", image_url=image_url)
        return Success(value=removed)

    @staticmethod
    def _unlink(path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True
