from pydantic import BaseModel, Field, field_serializer, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError
from datetime import datetime
from typing import Optional
from uuid import UUID

from domain.schemas.common import to_iso_utc


class UserCreate(BaseModel):
    """Registration payload"""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        try:
            validate_email(v)
        except PydanticCustomError:
            raise ValueError("Invalid email")
        return v.strip().lower()


class SessionResponse(BaseModel):
    session_id: str


class OwnerResponse(BaseModel):
    id: UUID
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return to_iso_utc(value)
