"""Allocation response schema."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class AllocationDetailsResponse(BaseModel):
    """Response schema for a single allocation."""

    id: UUID = Field(..., description="Allocation identifier")
    user_id: UUID = Field(..., description="Allocated user's id")
    username: str = Field(..., description="Allocated user's username")
    allocated: bool = Field(..., description="Whether the user is reserved")
    expires_at: datetime | None = Field(
        None,
        description="When the reservation lapses",
    )
