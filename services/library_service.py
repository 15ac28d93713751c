from typing import List
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from domain.caller import CallerContext
from domain.models import Exercise, FoodItem
from domain.schemas.library_schemas import ExerciseCreate, FoodItemCreate
from repositories import ExerciseRepository, FoodItemRepository
from services.access_policy import AccessPolicy
from app.exceptions import ConflictError

logger = logging.getLogger("fitcoach.library")


class LibraryService:
    """Shared exercise and food libraries"""

    @staticmethod
    def list_exercises(db: Session) -> List[Exercise]:
        return ExerciseRepository(db).list_all()

    @staticmethod
    def create_exercise(db: Session, caller: CallerContext, data: ExerciseCreate) -> Exercise:
        AccessPolicy.require_trainer(caller)
        exercise = ExerciseRepository(db).create(
            Exercise(
                name=data.name.strip(),
                description=data.description,
                video_url=data.video_url,
                creator_id=caller.profile_id,
            )
        )
        logger.info(f"exercise_created exercise_id={exercise.id} creator={caller.profile_id}")
        return exercise

    @staticmethod
    def list_foods(db: Session) -> List[FoodItem]:
        return FoodItemRepository(db).list_all()

    @staticmethod
    def create_food(db: Session, caller: CallerContext, data: FoodItemCreate) -> FoodItem:
        """
        Add a food to the library.

        Raises:
            ForbiddenError: caller is not a trainer
            ConflictError: a food with this name already exists
        """
        AccessPolicy.require_trainer(caller)
        name = data.name.strip()
        repo = FoodItemRepository(db)
        if repo.get_by_name(name) is not None:
            raise ConflictError(f"Food '{name}' already exists")

        try:
            food = repo.create(FoodItem(name=name, creator_id=caller.profile_id))
        except IntegrityError:
            db.rollback()
            raise ConflictError(f"Food '{name}' already exists")

        logger.info(f"food_created food_id={food.id} creator={caller.profile_id}")
        return food
