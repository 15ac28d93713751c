"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.profile_schemas import (
    AccountCreatedEvent,
    ProfileResponse,
    AddClientRequest,
    AddClientResult,
)
from domain.schemas.result_schemas import (
    OperationResult,
    ProgramCreateResult,
    FoodPlanCreateResult,
)
from domain.schemas.library_schemas import (
    ExerciseCreate,
    ExerciseResponse,
    FoodItemCreate,
    FoodItemResponse,
)
from domain.schemas.program_schemas import (
    ExerciseAssignmentCreate,
    TrainingDayCreate,
    ProgramCreate,
    ProgramExerciseResponse,
    TrainingDayResponse,
    ProgramResponse,
    ProgramSummary,
)
from domain.schemas.food_plan_schemas import (
    MealItemCreate,
    MealCreate,
    FoodDayCreate,
    FoodPlanCreate,
    MealItemResponse,
    MealResponse,
    FoodDayResponse,
    FoodPlanResponse,
    FoodPlanSummary,
)
from domain.schemas.activity_schemas import (
    WorkoutLogCreate,
    WorkoutLogResponse,
    ProgressPhotoCreate,
    ProgressPhotoResponse,
    ChatMessageCreate,
    ChatMessageResponse,
)
from domain.schemas.nutrition_schemas import NutritionEstimateRequest, NutritionEstimate

__all__ = [
    # Profile schemas
    "AccountCreatedEvent",
    "ProfileResponse",
    "AddClientRequest",
    "AddClientResult",
    # Results
    "OperationResult",
    "ProgramCreateResult",
    "FoodPlanCreateResult",
    # Library schemas
    "ExerciseCreate",
    "ExerciseResponse",
    "FoodItemCreate",
    "FoodItemResponse",
    # Program schemas
    "ExerciseAssignmentCreate",
    "TrainingDayCreate",
    "ProgramCreate",
    "ProgramExerciseResponse",
    "TrainingDayResponse",
    "ProgramResponse",
    "ProgramSummary",
    # Food plan schemas
    "MealItemCreate",
    "MealCreate",
    "FoodDayCreate",
    "FoodPlanCreate",
    "MealItemResponse",
    "MealResponse",
    "FoodDayResponse",
    "FoodPlanResponse",
    "FoodPlanSummary",
    # Activity schemas
    "WorkoutLogCreate",
    "WorkoutLogResponse",
    "ProgressPhotoCreate",
    "ProgressPhotoResponse",
    "ChatMessageCreate",
    "ChatMessageResponse",
    # Nutrition
    "NutritionEstimateRequest",
    "NutritionEstimate",
]
