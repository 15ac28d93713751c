"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.profile_repository import ProfileRepository, ClientLinkRepository
from repositories.library_repository import ExerciseRepository, FoodItemRepository
from repositories.program_repository import ProgramRepository
from repositories.food_plan_repository import FoodPlanRepository
from repositories.activity_repository import (
    WorkoutLogRepository,
    ProgressPhotoRepository,
    ChatRepository,
)

__all__ = [
    "BaseRepository",
    "ProfileRepository",
    "ClientLinkRepository",
    "ExerciseRepository",
    "FoodItemRepository",
    "ProgramRepository",
    "FoodPlanRepository",
    "WorkoutLogRepository",
    "ProgressPhotoRepository",
    "ChatRepository",
]
