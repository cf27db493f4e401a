"""Command handlers (CQRS write side)."""
