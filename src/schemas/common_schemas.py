"""Common schemas used across multiple API endpoints."""

from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import PersonSummary


class MessageResponse(BaseModel):
    """Response carrying only a confirmation message."""

    message: str = Field(..., description="Success message")


class PersonResponse(BaseModel):
    """Name and email of an organiser or attendee."""

    id: UUID
    name: str
    email: str

    @classmethod
    def from_dto(cls, dto: PersonSummary) -> "PersonResponse":
        return cls(id=dto.id, name=dto.name, email=dto.email)
