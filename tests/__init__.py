"""Test suite for the campus events API.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic, handlers and adapters in isolation
- integration/: Integration tests - repositories and handlers on SQLite
- api/: API endpoint tests - HTTP request/response cycle with stubbed handlers
- utils/: Shared fakes and entity factories
"""
