"""Meal ledger and adherence summary routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db_session, get_current_owner
from api.responses import BAD_REQUEST, NOT_FOUND, UNAUTHORIZED
from domain.models import Owner
from domain.schemas import MealCreate, MealUpdate, MealResponse, AdherenceSummary
from services.meal_service import MealService
from services.analytics_service import AnalyticsService

router = APIRouter(prefix="/meals", tags=["Meals"], responses=UNAUTHORIZED)
logger = logging.getLogger("dietlog.api.meals")


@router.get("", response_model=List[MealResponse])
def list_meals(
    owner: Owner = Depends(get_current_owner), db: Session = Depends(get_db_session)
):
    """List every meal of the user, most recent first"""
    meals = MealService.list_meals(db, owner)
    return [MealResponse.model_validate(m) for m in meals]


# Declared before "/{meal_id}" so "summary" is not parsed as an id
@router.get("/summary", response_model=AdherenceSummary)
def get_summary(
    owner: Owner = Depends(get_current_owner), db: Session = Depends(get_db_session)
):
    """
    Diet-adherence summary: meal counts and the best sequence of on-diet meals.
    """
    return AnalyticsService.summarize(db, owner)


@router.get(
    "/{meal_id}", response_model=MealResponse, responses={**BAD_REQUEST, **NOT_FOUND}
)
def get_meal(
    meal_id: UUID,
    owner: Owner = Depends(get_current_owner),
    db: Session = Depends(get_db_session),
):
    """Get a single meal"""
    meal = MealService.get_meal(db, owner, meal_id)
    return MealResponse.model_validate(meal)


@router.post(
    "",
    response_model=MealResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
def create_meal(
    payload: MealCreate,
    owner: Owner = Depends(get_current_owner),
    db: Session = Depends(get_db_session),
):
    """Log a new meal"""
    meal = MealService.create_meal(db, owner, payload)
    return MealResponse.model_validate(meal)


@router.patch(
    "/{meal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def update_meal(
    meal_id: UUID,
    payload: MealUpdate,
    owner: Owner = Depends(get_current_owner),
    db: Session = Depends(get_db_session),
):
    """
    Partially update a meal.

    Only the fields present in the body change; the rest keep their value.
    """
    MealService.update_meal(db, owner, meal_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{meal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def delete_meal(
    meal_id: UUID,
    owner: Owner = Depends(get_current_owner),
    db: Session = Depends(get_db_session),
):
    """Delete a meal"""
    MealService.delete_meal(db, owner, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
