"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
    enable_sqlite_foreign_keys,
)
from domain.models.profile import Profile, ClientLink
from domain.models.library import Exercise, FoodItem
from domain.models.training import (
    TrainingProgram,
    TrainingDay,
    ProgramExercise,
    WorkoutLog,
)
from domain.models.nutrition import FoodPlan, FoodDay, Meal, MealItem
from domain.models.activity import ProgressPhoto, ChatMessage

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    "enable_sqlite_foreign_keys",
    # Profiles
    "Profile",
    "ClientLink",
    # Libraries
    "Exercise",
    "FoodItem",
    # Training
    "TrainingProgram",
    "TrainingDay",
    "ProgramExercise",
    "WorkoutLog",
    # Nutrition
    "FoodPlan",
    "FoodDay",
    "Meal",
    "MealItem",
    # Activity
    "ProgressPhoto",
    "ChatMessage",
]
