"""Registration token generators."""

from src.infrastructure.tokens.qr_token_generator import QrTokenGenerator

__all__ = ["QrTokenGenerator"]
