"""Schemas for meal ledger requests, responses and adherence summaries"""

from pydantic import BaseModel, Field, StrictBool, field_serializer, field_validator
from typing import List, Optional
from datetime import datetime
from uuid import UUID

from domain.schemas.common import as_utc, to_iso_utc


class MealCreate(BaseModel):
    """Schema for logging a new meal"""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=1000)
    meal_date: datetime = Field(..., description="When the meal was eaten")
    on_diet: StrictBool = Field(..., description="Whether the meal is diet-compliant")

    @field_validator("meal_date")
    @classmethod
    def normalize_meal_date(cls, v: datetime) -> datetime:
        return as_utc(v)


class MealUpdate(BaseModel):
    """Partial update; omitted or null fields keep their stored value"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1, max_length=1000)
    meal_date: Optional[datetime] = None
    on_diet: Optional[StrictBool] = None

    @field_validator("meal_date")
    @classmethod
    def normalize_meal_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v) if v is not None else None

    def provided_fields(self) -> dict:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class MealResponse(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    description: str
    meal_date: datetime
    on_diet: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_serializer("meal_date", "created_at", "updated_at")
    def serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return to_iso_utc(value)


class AdherenceSummary(BaseModel):
    """Derived diet-adherence statistics; never persisted"""

    model_config = {"populate_by_name": True}

    total_meals: int = Field(0, alias="totalMeals")
    total_compliant: int = Field(0, alias="totalDietMeals")
    total_non_compliant: int = Field(0, alias="totalNotDietMeals")
    best_streak: List[str] = Field(
        default_factory=list, alias="bestDietSequence"
    )
