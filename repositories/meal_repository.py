"""
Meal Repository - Data access layer for the meal ledger
"""

from typing import List, Optional
from uuid import UUID
from datetime import datetime
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access; every query is scoped to one owner"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_for_owner(self, owner_id: UUID, meal_id: UUID) -> Optional[Meal]:
        """Get a meal only if it belongs to ``owner_id``"""
        return (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == owner_id)
            .first()
        )

    def list_by_owner(self, owner_id: UUID, ascending: bool = False) -> List[Meal]:
        """All meals of an owner ordered by meal time (most recent first by default)"""
        order = Meal.meal_date.asc() if ascending else Meal.meal_date.desc()
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == owner_id)
            .order_by(order, Meal.created_at.asc())
            .all()
        )

    def create_meal(
        self,
        owner_id: UUID,
        name: str,
        description: str,
        meal_date: datetime,
        on_diet: bool,
    ) -> Meal:
        """Create a new meal entry"""
        meal = Meal(
            user_id=owner_id,
            name=name,
            description=description,
            meal_date=meal_date,
            on_diet=on_diet,
        )
        return self.create(meal)

