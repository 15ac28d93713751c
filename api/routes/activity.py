"""Workout log, progress photo and chat routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from uuid import UUID
from typing import List, Optional

from api.dependencies import get_db, get_caller
from api.responses import ERROR_RESPONSES
from domain.caller import CallerContext
from domain.schemas.activity_schemas import (
    ChatMessageCreate,
    ChatMessageResponse,
    ProgressPhotoCreate,
    ProgressPhotoResponse,
    WorkoutLogCreate,
    WorkoutLogResponse,
)
from services.chat_service import ChatService
from services.progress_service import ProgressService
from services.workout_service import WorkoutService

router = APIRouter(tags=["Activity"], responses=ERROR_RESPONSES)


@router.post("/workout-logs", response_model=WorkoutLogResponse, status_code=status.HTTP_201_CREATED)
def log_set(
    payload: WorkoutLogCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """Log one completed set of an exercise from the caller's own program."""
    return WorkoutLogResponse.model_validate(WorkoutService.log_set(db, caller, payload))


@router.get("/workout-logs", response_model=List[WorkoutLogResponse])
def list_workout_logs(
    client_id: Optional[UUID] = Query(None, description="Defaults to the caller"),
    program_exercise_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    logs = WorkoutService.list_logs(db, caller, client_id, program_exercise_id)
    return [WorkoutLogResponse.model_validate(log) for log in logs]


@router.post(
    "/progress-photos", response_model=ProgressPhotoResponse, status_code=status.HTTP_201_CREATED
)
def save_progress_photo(
    payload: ProgressPhotoCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """Record a photo already uploaded to the blob store."""
    return ProgressPhotoResponse.model_validate(ProgressService.save_photo(db, caller, payload))


@router.get("/progress-photos", response_model=List[ProgressPhotoResponse])
def list_progress_photos(
    client_id: Optional[UUID] = Query(None, description="Defaults to the caller"),
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    photos = ProgressService.list_photos(db, caller, client_id)
    return [ProgressPhotoResponse.model_validate(p) for p in photos]


@router.post("/messages", response_model=ChatMessageResponse, status_code=status.HTTP_201_CREATED)
def send_message(
    payload: ChatMessageCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    return ChatMessageResponse.model_validate(ChatService.send_message(db, caller, payload))


@router.get("/messages/{other_user_id}", response_model=List[ChatMessageResponse])
def get_conversation(
    other_user_id: UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """Messages between the caller and another profile, oldest first."""
    messages = ChatService.get_conversation(db, caller, other_user_id)
    return [ChatMessageResponse.model_validate(m) for m in messages]
