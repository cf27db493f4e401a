"""Domain enums."""

from src.domain.enums.account_role import AccountRole

__all__ = ["AccountRole"]
