"""Services package - Business logic layer"""

from services.identity_service import IdentityService
from services.meal_service import MealService
from services.analytics_service import AnalyticsService, compute_adherence

__all__ = [
    "IdentityService",
    "MealService",
    "AnalyticsService",
    "compute_adherence",
]
