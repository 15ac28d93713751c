"""
Plan domain mappers.
Handles transformation between program/food-plan ORM trees and DTOs.
"""

from domain.models import TrainingProgram, FoodPlan
from domain.schemas.program_schemas import ProgramResponse, ProgramSummary
from domain.schemas.food_plan_schemas import FoodPlanResponse, FoodPlanSummary


class PlanMapper:
    """Mapper for training program and food plan transformations."""

    @staticmethod
    def program_to_response(program: TrainingProgram) -> ProgramResponse:
        """
        Convert a TrainingProgram with its days and assignments to ProgramResponse.

        Days and assignments keep the relationship ordering (day_order,
        exercise_order); each assignment embeds its library exercise.
        """
        return ProgramResponse.model_validate(program)

    @staticmethod
    def program_to_summary(program: TrainingProgram) -> ProgramSummary:
        return ProgramSummary(
            id=program.id,
            name=program.name,
            description=program.description,
            client_id=program.client_id,
            client_name=program.client.full_name if program.client else None,
            created_at=program.created_at,
        )

    @staticmethod
    def food_plan_to_response(plan: FoodPlan) -> FoodPlanResponse:
        return FoodPlanResponse.model_validate(plan)

    @staticmethod
    def food_plan_to_summary(plan: FoodPlan) -> FoodPlanSummary:
        return FoodPlanSummary(
            id=plan.id,
            name=plan.name,
            client_id=plan.client_id,
            client_name=plan.client.full_name if plan.client else None,
            created_at=plan.created_at,
        )
