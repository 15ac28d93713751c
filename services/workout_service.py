from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from domain.caller import CallerContext
from domain.models import WorkoutLog
from domain.schemas.activity_schemas import WorkoutLogCreate
from repositories import ProgramRepository, WorkoutLogRepository
from services.access_policy import AccessPolicy
from app.exceptions import ConflictError, ForbiddenError, NotFoundError

logger = logging.getLogger("fitcoach.workout")


class WorkoutService:
    """Append-only log of sets completed by clients"""

    @staticmethod
    def log_set(db: Session, caller: CallerContext, data: WorkoutLogCreate) -> WorkoutLog:
        """
        Record one completed set against an exercise of the caller's own program.

        Raises:
            ForbiddenError: caller is not a client, or the exercise belongs to
                someone else's program
            NotFoundError: no such program exercise
            ConflictError: the same set was already logged at the same instant
        """
        AccessPolicy.require_client(caller)

        assignment = ProgramRepository(db).get_assignment(data.program_exercise_id)
        if assignment is None:
            raise NotFoundError(f"Program exercise {data.program_exercise_id} not found")
        if assignment.day.program.client_id != caller.profile_id:
            logger.info(
                f"access_denied reason=foreign_program caller={caller.profile_id} "
                f"program_exercise_id={data.program_exercise_id}"
            )
            raise ForbiddenError()

        log = WorkoutLog(
            program_exercise_id=data.program_exercise_id,
            client_id=caller.profile_id,
            set_number=data.set_number,
            reps_completed=data.reps_completed,
            weight_used=data.weight_used,
        )
        try:
            log = WorkoutLogRepository(db).create(log)
        except IntegrityError:
            db.rollback()
            raise ConflictError(f"Set {data.set_number} is already logged")

        logger.info(
            f"workout_set_logged log_id={log.id} client={caller.profile_id} "
            f"program_exercise_id={log.program_exercise_id} set={log.set_number}"
        )
        return log

    @staticmethod
    def list_logs(
        db: Session,
        caller: CallerContext,
        client_id: Optional[UUID] = None,
        program_exercise_id: Optional[int] = None,
    ) -> List[WorkoutLog]:
        """Logs of ``client_id`` (the caller when omitted), oldest first"""
        client_id = client_id or caller.profile_id
        AccessPolicy.require_client_data_access(db, caller, client_id)
        return WorkoutLogRepository(db).list_for_client(client_id, program_exercise_id)
