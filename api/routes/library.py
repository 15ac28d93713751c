"""Exercise and food library routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import get_db, get_caller
from api.responses import ERROR_RESPONSES
from domain.caller import CallerContext
from domain.schemas.library_schemas import (
    ExerciseCreate,
    ExerciseResponse,
    FoodItemCreate,
    FoodItemResponse,
)
from services.library_service import LibraryService

router = APIRouter(prefix="/library", tags=["Library"], responses=ERROR_RESPONSES)


@router.get("/exercises", response_model=List[ExerciseResponse])
def list_exercises(db: Session = Depends(get_db), caller: CallerContext = Depends(get_caller)):
    return [ExerciseResponse.model_validate(e) for e in LibraryService.list_exercises(db)]


@router.post("/exercises", response_model=ExerciseResponse, status_code=status.HTTP_201_CREATED)
def create_exercise(
    payload: ExerciseCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    return ExerciseResponse.model_validate(LibraryService.create_exercise(db, caller, payload))


@router.get("/foods", response_model=List[FoodItemResponse])
def list_foods(db: Session = Depends(get_db), caller: CallerContext = Depends(get_caller)):
    return [FoodItemResponse.model_validate(f) for f in LibraryService.list_foods(db)]


@router.post("/foods", response_model=FoodItemResponse, status_code=status.HTTP_201_CREATED)
def create_food(
    payload: FoodItemCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """Add a food; names are unique across the library (409 on a duplicate)."""
    return FoodItemResponse.model_validate(LibraryService.create_food(db, caller, payload))
