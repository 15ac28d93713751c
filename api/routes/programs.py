"""Training program routes"""

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
import logging
from typing import Any, Dict, List, Optional

from api.dependencies import get_db, get_caller
from api.responses import DeletedResponse, ERROR_RESPONSES, composite_response
from domain.caller import CallerContext
from domain.mappers import PlanMapper
from domain.schemas.program_schemas import ProgramResponse, ProgramSummary, TrainingDayResponse
from domain.schemas.result_schemas import ProgramCreateResult
from services.program_service import ProgramService
from app.exceptions import NotFoundError

router = APIRouter(tags=["Programs"], responses=ERROR_RESPONSES)
logger = logging.getLogger("fitcoach.api.programs")


@router.post("/programs", response_model=ProgramCreateResult, status_code=201)
def create_program(
    document: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """
    Create a program with its days and exercise assignments in one request.

    The nested document is validated by the service, so malformed fields come
    back as a tagged ``validation_error`` result rather than a 422.
    """
    result = ProgramService.create_full_program(db, caller, document)
    return composite_response(result)


@router.get("/programs", response_model=List[ProgramSummary])
def list_programs(db: Session = Depends(get_db), caller: CallerContext = Depends(get_caller)):
    programs = ProgramService.list_programs(db, caller)
    return [PlanMapper.program_to_summary(p) for p in programs]


@router.get("/programs/{program_id}", response_model=ProgramResponse)
def get_program(
    program_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    return PlanMapper.program_to_response(ProgramService.get_program(db, caller, program_id))


@router.delete("/programs/{program_id}", response_model=DeletedResponse)
def delete_program(
    program_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    if not ProgramService.delete_program(db, caller, program_id):
        raise NotFoundError(f"Program {program_id} not found")
    return DeletedResponse(removed=str(program_id))


@router.get("/me/program", response_model=Optional[ProgramResponse])
def get_my_program(db: Session = Depends(get_db), caller: CallerContext = Depends(get_caller)):
    """The caller's latest program as a client, or null."""
    program = ProgramService.get_assigned_program(db, caller)
    return PlanMapper.program_to_response(program) if program else None


@router.get("/training-days/{day_id}", response_model=TrainingDayResponse)
def get_training_day(
    day_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    day = ProgramService.get_training_day(db, caller, day_id)
    return TrainingDayResponse.model_validate(day)
