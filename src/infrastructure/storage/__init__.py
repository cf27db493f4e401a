"""Image storage adapters."""

from src.infrastructure.storage.local_image_storage import LocalImageStorage

__all__ = ["LocalImageStorage"]
