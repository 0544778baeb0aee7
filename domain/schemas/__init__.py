"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import UserCreate, SessionResponse, OwnerResponse
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    AdherenceSummary,
)
from domain.schemas.common import as_utc, to_iso_utc, first_validation_issue

__all__ = [
    # User schemas
    "UserCreate",
    "SessionResponse",
    "OwnerResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "AdherenceSummary",
    # Helpers
    "as_utc",
    "to_iso_utc",
    "first_validation_issue",
]
