#!/usr/bin/env python3
"""
Standalone database initialization script.

Creates the FitCoach tables and seeds the shared exercise and food libraries
with a starter set. Safe to run repeatedly: existing library rows are kept.
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from domain.models import Exercise, FoodItem
from domain.models.database import SessionLocal, engine, init_database

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")

STARTER_EXERCISES = [
    ("Barbell Bench Press", "Flat bench, bar to mid chest"),
    ("Back Squat", "High-bar, hips below parallel"),
    ("Deadlift", "Conventional stance"),
    ("Overhead Press", "Standing, strict"),
    ("Pull-up", "Full hang to chin over bar"),
    ("Barbell Row", "Torso near parallel"),
    ("Romanian Deadlift", "Soft knees, hinge at the hips"),
    ("Walking Lunge", None),
    ("Plank", "Hold for time"),
]

STARTER_FOODS = [
    "Chicken breast",
    "Brown rice",
    "Oats",
    "Eggs",
    "Greek yogurt",
    "Banana",
    "Broccoli",
    "Salmon",
    "Sweet potato",
    "Olive oil",
]


def seed_library(db) -> dict:
    """Insert the starter library rows that are not present yet; returns counts"""
    existing_exercises = {name for (name,) in db.query(Exercise.name).all()}
    existing_foods = {name for (name,) in db.query(FoodItem.name).all()}

    new_exercises = [
        Exercise(name=name, description=description)
        for name, description in STARTER_EXERCISES
        if name not in existing_exercises
    ]
    new_foods = [FoodItem(name=name) for name in STARTER_FOODS if name not in existing_foods]

    db.add_all(new_exercises + new_foods)
    db.commit()
    return {"exercises": len(new_exercises), "foods": len(new_foods)}


def main() -> int:
    logger.info("=" * 60)
    logger.info("FitCoach Database Initialization")
    logger.info("=" * 60)

    try:
        init_database()
        tables = inspect(engine).get_table_names()
        logger.info(f"Created {len(tables)} tables: {', '.join(sorted(tables))}")
    except SQLAlchemyError as e:
        logger.error(f"Failed to create tables: {e}")
        return 1

    db = SessionLocal()
    try:
        counts = seed_library(db)
        logger.info(
            f"Seeded library: {counts['exercises']} exercises, {counts['foods']} foods"
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to seed library: {e}")
        return 1
    finally:
        db.close()

    logger.info("Database ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
