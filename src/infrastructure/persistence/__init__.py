"""Database persistence infrastructure.

- Base model for all tables
- Database connection and session management
- Unit of work (transaction boundary)
- Repository implementations
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "BaseModel",
    "Database",
    "SqlAlchemyUnitOfWork",
]
