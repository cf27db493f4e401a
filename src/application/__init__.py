"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations (sign-up, event management, registrations)
- Queries: Read operations (event catalog, a student's registrations)

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- dtos/: Handler results consumed by the presentation layer
- services/: OTP issuing, access rules, background confirmation emails

The application layer orchestrates domain logic and depends only on the
domain protocols, never on SQLAlchemy, Redis or SMTP directly.
"""
