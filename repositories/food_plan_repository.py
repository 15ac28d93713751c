"""
Food Plan Repository - plans, days, meals and meal items
"""

from __future__ import annotations

from datetime import time
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload, selectinload

from repositories.base import BaseRepository
from domain.models import FoodPlan, FoodDay, Meal, MealItem


def _tree_options():
    return (
        selectinload(FoodPlan.days)
        .selectinload(FoodDay.meals)
        .selectinload(Meal.items)
        .joinedload(MealItem.food),
    )


class FoodPlanRepository(BaseRepository[FoodPlan]):
    """Repository for food plan trees; ``add_*`` methods flush only"""

    def __init__(self, db: Session):
        super().__init__(db, FoodPlan)

    def add_plan(self, name: str, trainer_id: UUID, client_id: UUID) -> FoodPlan:
        plan = FoodPlan(name=name, trainer_id=trainer_id, client_id=client_id)
        return self.stage(plan)

    def add_day(self, plan_id: int, name: str, day_order: Optional[int]) -> FoodDay:
        day = FoodDay(plan_id=plan_id, name=name, day_order=day_order)
        return self.stage(day)

    def add_meal(
        self,
        day_id: int,
        name: str,
        meal_time: Optional[time],
        meal_order: Optional[int],
    ) -> Meal:
        meal = Meal(day_id=day_id, name=name, meal_time=meal_time, meal_order=meal_order)
        return self.stage(meal)

    def add_item(
        self,
        meal_id: int,
        food_id: int,
        quantity: Optional[str],
        notes: Optional[str],
    ) -> MealItem:
        item = MealItem(meal_id=meal_id, food_id=food_id, quantity=quantity, notes=notes)
        return self.stage(item)

    def get_tree(self, plan_id: int) -> Optional[FoodPlan]:
        return (
            self.db.query(FoodPlan)
            .options(*_tree_options())
            .filter(FoodPlan.id == plan_id)
            .first()
        )

    def latest_tree_for_client(self, client_id: UUID) -> Optional[FoodPlan]:
        return (
            self.db.query(FoodPlan)
            .options(*_tree_options())
            .filter(FoodPlan.client_id == client_id)
            .order_by(FoodPlan.created_at.desc(), FoodPlan.id.desc())
            .first()
        )

    def list_for_trainer(self, trainer_id: UUID) -> List[FoodPlan]:
        return (
            self.db.query(FoodPlan)
            .options(joinedload(FoodPlan.client))
            .filter(FoodPlan.trainer_id == trainer_id)
            .order_by(FoodPlan.created_at.desc(), FoodPlan.id.desc())
            .all()
        )
