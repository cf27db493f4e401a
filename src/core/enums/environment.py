"""Application environment types.

Used by Settings to pick environment-specific behavior (log renderer,
email adapter, cookie security).

Environments:
- DEVELOPMENT: Local development with reload and colored console logs
- TESTING: Automated test runs against an isolated database
- CI: Continuous integration
- PRODUCTION: Deployed service with secure cookies and real SMTP delivery
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
