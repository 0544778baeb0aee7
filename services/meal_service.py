from typing import List, Mapping, Any, Type, TypeVar, Union
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from pydantic import BaseModel, ValidationError
import logging

from domain.models import Meal, Owner
from domain.schemas import MealCreate, MealUpdate, first_validation_issue
from repositories import MealRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("dietlog.meals")

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def parse_payload(
    schema: Type[SchemaType], payload: Union[SchemaType, Mapping[str, Any]]
) -> SchemaType:
    """Validate a raw mapping against ``schema``.

    Already-validated schema instances pass through untouched. Failures are
    raised as ServiceValidationError naming the first failing field.
    """
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        field, reason = first_validation_issue(e.errors())
        raise ServiceValidationError(field=field, reason=reason) from e


class MealService:
    """
    Meal ledger operations, always scoped to an already-resolved owner.

    A meal that does not exist and a meal owned by someone else are both
    reported as NotFoundError("Meal not found").
    """

    @staticmethod
    def list_meals(db: Session, owner: Owner) -> List[Meal]:
        """All meals of the owner, most recent meal time first"""
        return MealRepository(db).list_by_owner(owner.id)

    @staticmethod
    def get_meal(db: Session, owner: Owner, meal_id: UUID) -> Meal:
        meal = MealRepository(db).get_for_owner(owner.id, meal_id)
        if meal is None:
            logger.info(f"meal_not_found owner_id={owner.id} meal_id={meal_id}")
            raise NotFoundError.for_entity("Meal")
        return meal

    @staticmethod
    def create_meal(
        db: Session, owner: Owner, payload: Union[MealCreate, Mapping[str, Any]]
    ) -> Meal:
        """
        Log a new meal for the owner.

        Raises:
            ServiceValidationError: first invalid field of the payload
        """
        data = parse_payload(MealCreate, payload)
        meal = MealRepository(db).create_meal(
            owner_id=owner.id,
            name=data.name,
            description=data.description,
            meal_date=data.meal_date,
            on_diet=data.on_diet,
        )
        logger.info(
            f"meal_created owner_id={owner.id} meal_id={meal.id} on_diet={meal.on_diet}"
        )
        return meal

    @staticmethod
    def update_meal(
        db: Session,
        owner: Owner,
        meal_id: UUID,
        payload: Union[MealUpdate, Mapping[str, Any]],
    ) -> None:
        """
        Apply a partial update. Omitted or null fields keep their stored
        value; the provided ones are committed together or not at all.

        Raises:
            ServiceValidationError: first invalid provided field
            NotFoundError: no such meal for this owner
        """
        changes = parse_payload(MealUpdate, payload).provided_fields()
        repo = MealRepository(db)
        meal = MealService.get_meal(db, owner, meal_id)

        try:
            for key, value in changes.items():
                setattr(meal, key, value)
            repo.update(meal)
        except SQLAlchemyError:
            db.rollback()
            raise

        logger.info(
            f"meal_updated owner_id={owner.id} meal_id={meal_id} "
            f"fields={','.join(sorted(changes)) or '-'}"
        )

    @staticmethod
    def delete_meal(db: Session, owner: Owner, meal_id: UUID) -> None:
        """
        Remove a meal. Deleting an already deleted meal raises NotFoundError.
        """
        meal = MealService.get_meal(db, owner, meal_id)
        MealRepository(db).delete(meal)
        logger.info(f"meal_deleted owner_id={owner.id} meal_id={meal_id}")
