from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class ExerciseCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    video_url: Optional[str] = None


class ExerciseResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    video_url: Optional[str] = None
    creator_id: Optional[UUID] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class FoodItemCreate(BaseModel):
    name: str = Field(..., min_length=1)


class FoodItemResponse(BaseModel):
    id: int
    name: str
    creator_id: Optional[UUID] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
