from __future__ import annotations

from datetime import datetime, time
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from domain.schemas.library_schemas import FoodItemResponse
from domain.schemas.program_schemas import reject_bool


class MealItemCreate(BaseModel):
    food_id: int = Field(..., ge=1)
    quantity: Optional[str] = Field(None, description="e.g. '100g', '1 cup'")
    notes: Optional[str] = None

    @field_validator("food_id", mode="before")
    @classmethod
    def food_id_not_bool(cls, v):
        return reject_bool(v)


class MealCreate(BaseModel):
    name: str = Field(..., min_length=1)
    meal_time: Optional[time] = None
    meal_order: Optional[int] = None
    items: List[MealItemCreate] = Field(default_factory=list)

    @field_validator("meal_order", mode="before")
    @classmethod
    def meal_order_not_bool(cls, v):
        return reject_bool(v)


class FoodDayCreate(BaseModel):
    name: str = Field(..., min_length=1)
    day_order: Optional[int] = None
    meals: List[MealCreate] = Field(default_factory=list)

    @field_validator("day_order", mode="before")
    @classmethod
    def day_order_not_bool(cls, v):
        return reject_bool(v)


class FoodPlanCreate(BaseModel):
    name: str = Field(..., min_length=1)
    client_id: UUID
    days: List[FoodDayCreate] = Field(default_factory=list)


class MealItemResponse(BaseModel):
    id: int
    food_id: int
    quantity: Optional[str] = None
    notes: Optional[str] = None
    food: Optional[FoodItemResponse] = None

    model_config = {"from_attributes": True}


class MealResponse(BaseModel):
    id: int
    name: str
    meal_time: Optional[time] = None
    meal_order: Optional[int] = None
    items: List[MealItemResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class FoodDayResponse(BaseModel):
    id: int
    plan_id: int
    name: str
    day_order: Optional[int] = None
    meals: List[MealResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class FoodPlanResponse(BaseModel):
    id: int
    name: str
    trainer_id: UUID
    client_id: UUID
    created_at: Optional[datetime] = None
    days: List[FoodDayResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class FoodPlanSummary(BaseModel):
    id: int
    name: str
    client_id: UUID
    client_name: Optional[str] = None
    created_at: Optional[datetime] = None
