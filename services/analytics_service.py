"""
Diet-adherence analytics over an owner's meal history.
"""

from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import Meal, Owner
from domain.schemas import AdherenceSummary
from repositories import MealRepository
from app.config import settings

logger = logging.getLogger("dietlog.analytics")


def compute_adherence(
    meals: Iterable[Meal], include_trailing_streak: bool = False
) -> AdherenceSummary:
    """
    Summarize a meal history sorted by meal time ascending.

    A compliant run is only compared with the best one when a non-compliant
    meal closes it, and it must be strictly longer to replace it, so the
    earliest of equally long runs wins. A run still open at the end of the
    history is ignored unless ``include_trailing_streak`` is set.

    Args:
        meals: objects exposing ``name`` and ``on_diet``, oldest first
        include_trailing_streak: also evaluate the run open at the end

    Returns:
        AdherenceSummary with counts and the best streak's meal names
    """
    total = compliant = non_compliant = 0
    best: List[str] = []
    current: List[str] = []

    for meal in meals:
        total += 1
        if meal.on_diet:
            compliant += 1
            current.append(meal.name)
        else:
            non_compliant += 1
            if len(current) > len(best):
                best = current
            current = []

    if include_trailing_streak and len(current) > len(best):
        best = current

    return AdherenceSummary(
        total_meals=total,
        total_compliant=compliant,
        total_non_compliant=non_compliant,
        best_streak=best,
    )


class AnalyticsService:
    """Read-only analytics; never mutates the ledger"""

    @staticmethod
    def summarize(
        db: Session, owner: Owner, include_trailing_streak: Optional[bool] = None
    ) -> AdherenceSummary:
        """Compute the owner's summary from a single ascending read of their meals"""
        if include_trailing_streak is None:
            include_trailing_streak = settings.summary_include_trailing_streak

        meals = MealRepository(db).list_by_owner(owner.id, ascending=True)
        summary = compute_adherence(meals, include_trailing_streak)
        logger.info(
            f"summary_computed owner_id={owner.id} total={summary.total_meals} "
            f"best_streak={len(summary.best_streak)}"
        )
        return summary
