"""Presentation layer - HTTP routers, dependencies and error responses."""
