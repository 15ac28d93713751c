from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class WorkoutLogCreate(BaseModel):
    """Schema for logging one completed set"""

    program_exercise_id: int = Field(..., ge=1)
    set_number: int = Field(..., ge=1)
    reps_completed: Optional[int] = Field(None, ge=0)
    weight_used: Optional[Decimal] = Field(None, ge=0, description="Load in kg")


class WorkoutLogResponse(BaseModel):
    id: int
    program_exercise_id: int
    client_id: UUID
    set_number: int
    reps_completed: Optional[int] = None
    weight_used: Optional[Decimal] = None
    log_date: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProgressPhotoCreate(BaseModel):
    photo_url: str = Field(..., min_length=1, description="Public URL issued by the blob store")
    taken_on: date
    notes: Optional[str] = ""


class ProgressPhotoResponse(BaseModel):
    id: int
    client_id: UUID
    photo_url: str
    taken_on: date
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ChatMessageCreate(BaseModel):
    receiver_id: UUID
    message_text: str

    @field_validator("message_text")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("message_text must not be empty")
        return v


class ChatMessageResponse(BaseModel):
    id: int
    sender_id: UUID
    receiver_id: UUID
    message_text: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
