"""Infrastructure layer - Adapters and external integrations.

Implementations of domain protocols (ports):
- persistence/: SQLAlchemy models, repositories, unit of work
- sessions/: Redis session store
- email/: SMTP and stub email services
- tokens/: QR code token generator
- storage/: Local image storage
- security/: Password hashing
- events/: In-memory event bus and handlers
- logging/: structlog adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
