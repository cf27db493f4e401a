"""Security infrastructure adapters (password hashing)."""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService

__all__ = ["BcryptPasswordService"]
