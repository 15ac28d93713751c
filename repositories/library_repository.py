"""
Library Repository - exercise and food libraries
"""

from typing import Iterable, List, Optional, Set
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Exercise, FoodItem


class ExerciseRepository(BaseRepository[Exercise]):
    """Repository for the exercise library"""

    def __init__(self, db: Session):
        super().__init__(db, Exercise)

    def list_all(self) -> List[Exercise]:
        return self.db.query(Exercise).order_by(Exercise.name).all()

    def existing_ids(self, ids: Iterable[int]) -> Set[int]:
        """Subset of ``ids`` that reference a library exercise"""
        wanted = set(ids)
        if not wanted:
            return set()
        rows = self.db.query(Exercise.id).filter(Exercise.id.in_(wanted)).all()
        return {row.id for row in rows}


class FoodItemRepository(BaseRepository[FoodItem]):
    """Repository for the food library"""

    def __init__(self, db: Session):
        super().__init__(db, FoodItem)

    def list_all(self) -> List[FoodItem]:
        return self.db.query(FoodItem).order_by(FoodItem.name).all()

    def get_by_name(self, name: str) -> Optional[FoodItem]:
        return self.db.query(FoodItem).filter(FoodItem.name == name).first()

    def existing_ids(self, ids: Iterable[int]) -> Set[int]:
        wanted = set(ids)
        if not wanted:
            return set()
        rows = self.db.query(FoodItem.id).filter(FoodItem.id.in_(wanted)).all()
        return {row.id for row in rows}
