"""Services package - Business logic layer"""

from services.access_policy import AccessPolicy
from services.account_service import AccountService
from services.client_service import ClientService
from services.library_service import LibraryService
from services.program_service import ProgramService
from services.food_plan_service import FoodPlanService
from services.workout_service import WorkoutService
from services.progress_service import ProgressService
from services.chat_service import ChatService
from services.nutrition_service import NutritionService

__all__ = [
    "AccessPolicy",
    "AccountService",
    "ClientService",
    "LibraryService",
    "ProgramService",
    "FoodPlanService",
    "WorkoutService",
    "ProgressService",
    "ChatService",
    "NutritionService",
]
