"""Query handlers (CQRS read side)."""
