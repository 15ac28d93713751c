from typing import Any, List, Mapping, Optional, Union
import logging

from sqlalchemy.orm import Session

from domain.caller import CallerContext
from domain.enums import Role
from domain.models import FoodPlan
from domain.schemas.food_plan_schemas import FoodPlanCreate
from domain.schemas.result_schemas import FoodPlanCreateResult
from repositories import ProfileRepository, FoodItemRepository, FoodPlanRepository
from services.access_policy import AccessPolicy
from services.composite import run_composite_create
from app.exceptions import NotFoundError

logger = logging.getLogger("fitcoach.food_plan")


class FoodPlanService:
    """Business logic for food plans (plan -> day -> meal -> item)"""

    @staticmethod
    def create_full_food_plan(
        db: Session,
        caller: CallerContext,
        document: Union[FoodPlanCreate, Mapping[str, Any]],
    ) -> FoodPlanCreateResult:
        """Create a food plan with its days, meals and items as one unit."""

        def build(doc: FoodPlanCreate) -> int:
            FoodPlanService._check_preconditions(db, caller, doc)
            repo = FoodPlanRepository(db)

            plan = repo.add_plan(doc.name, caller.profile_id, doc.client_id)
            meal_count = 0
            for day_doc in doc.days:
                day = repo.add_day(plan.id, day_doc.name, day_doc.day_order)
                for meal_doc in day_doc.meals:
                    meal = repo.add_meal(
                        day.id, meal_doc.name, meal_doc.meal_time, meal_doc.meal_order
                    )
                    meal_count += 1
                    for item in meal_doc.items:
                        repo.add_item(meal.id, item.food_id, item.quantity, item.notes)

            logger.info(
                f"food_plan_tree_written food_plan_id={plan.id} trainer={caller.profile_id} "
                f"client={doc.client_id} days={len(doc.days)} meals={meal_count}"
            )
            return plan.id

        return run_composite_create(
            db,
            label="food_plan",
            schema=FoodPlanCreate,
            document=document,
            build=build,
            result_cls=FoodPlanCreateResult,
            id_field="food_plan_id",
        )

    @staticmethod
    def _check_preconditions(db: Session, caller: CallerContext, doc: FoodPlanCreate) -> None:
        AccessPolicy.require_trainer(caller)

        client = ProfileRepository(db).get_by_id(doc.client_id)
        if client is None or client.role != Role.CLIENT.value:
            raise NotFoundError(f"Client {doc.client_id} not found")
        AccessPolicy.require_roster_client(db, caller, doc.client_id)

        wanted = {
            item.food_id
            for day in doc.days
            for meal in day.meals
            for item in meal.items
        }
        missing = wanted - FoodItemRepository(db).existing_ids(wanted)
        if missing:
            ids = ", ".join(str(i) for i in sorted(missing))
            raise NotFoundError(f"Unknown food id(s): {ids}")

    @staticmethod
    def list_food_plans(db: Session, caller: CallerContext) -> List[FoodPlan]:
        AccessPolicy.require_trainer(caller)
        return FoodPlanRepository(db).list_for_trainer(caller.profile_id)

    @staticmethod
    def get_food_plan(db: Session, caller: CallerContext, plan_id: int) -> FoodPlan:
        plan = FoodPlanRepository(db).get_tree(plan_id)
        if plan is None:
            raise NotFoundError(f"Food plan {plan_id} not found")
        AccessPolicy.require_plan_party(caller, plan)
        return plan

    @staticmethod
    def get_assigned_food_plan(db: Session, caller: CallerContext) -> Optional[FoodPlan]:
        return FoodPlanRepository(db).latest_tree_for_client(caller.profile_id)

    @staticmethod
    def delete_food_plan(db: Session, caller: CallerContext, plan_id: int) -> bool:
        repo = FoodPlanRepository(db)
        plan = repo.get_by_id(plan_id)
        if plan is None:
            return False
        AccessPolicy.require_plan_owner(caller, plan)
        repo.delete(plan_id)
        logger.info(f"food_plan_deleted food_plan_id={plan_id} trainer={caller.profile_id}")
        return True
