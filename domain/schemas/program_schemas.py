"""
Schemas for the nested training program document and its read models.

The create schemas validate the whole tree before any row is written; numbers
may arrive either as JSON numbers or as their text form ("3").
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from domain.schemas.library_schemas import ExerciseResponse


def reject_bool(v):
    """JSON true/false is not a number here, even though int(True) == 1"""
    if isinstance(v, bool):
        raise ValueError("must be a number, not a boolean")
    return v


class ExerciseAssignmentCreate(BaseModel):
    exercise_id: int = Field(..., ge=1)
    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[str] = Field(None, description="Free-form, e.g. '8-12'")
    rest_period_seconds: Optional[int] = Field(None, ge=0)
    exercise_order: Optional[int] = None
    notes: Optional[str] = None

    @field_validator("exercise_id", "sets", "rest_period_seconds", "exercise_order", mode="before")
    @classmethod
    def numbers_not_bool(cls, v):
        return reject_bool(v)

    @field_validator("reps", mode="before")
    @classmethod
    def reps_as_text(cls, v):
        if isinstance(v, bool):
            raise ValueError("reps must be text or a number")
        if isinstance(v, (int, float)):
            return str(v)
        return v


class TrainingDayCreate(BaseModel):
    name: str = Field(..., min_length=1)
    day_order: Optional[int] = None
    exercises: List[ExerciseAssignmentCreate] = Field(default_factory=list)

    @field_validator("day_order", mode="before")
    @classmethod
    def day_order_not_bool(cls, v):
        return reject_bool(v)


class ProgramCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    client_id: UUID
    days: List[TrainingDayCreate] = Field(default_factory=list)


class ProgramExerciseResponse(BaseModel):
    id: int
    exercise_id: int
    sets: Optional[int] = None
    reps: Optional[str] = None
    rest_period_seconds: Optional[int] = None
    exercise_order: Optional[int] = None
    notes: Optional[str] = None
    exercise: Optional[ExerciseResponse] = None

    model_config = {"from_attributes": True}


class TrainingDayResponse(BaseModel):
    id: int
    program_id: int
    name: str
    day_order: Optional[int] = None
    exercises: List[ProgramExerciseResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class ProgramResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    trainer_id: UUID
    client_id: UUID
    created_at: Optional[datetime] = None
    days: List[TrainingDayResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class ProgramSummary(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    client_id: UUID
    client_name: Optional[str] = None
    created_at: Optional[datetime] = None
