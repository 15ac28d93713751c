from typing import Any, List, Mapping, Optional, Union
import logging

from sqlalchemy.orm import Session

from domain.caller import CallerContext
from domain.enums import Role
from domain.models import TrainingProgram, TrainingDay
from domain.schemas.program_schemas import ProgramCreate
from domain.schemas.result_schemas import ProgramCreateResult
from repositories import ProfileRepository, ExerciseRepository, ProgramRepository
from services.access_policy import AccessPolicy
from services.composite import run_composite_create
from app.exceptions import NotFoundError

logger = logging.getLogger("fitcoach.program")


class ProgramService:
    """Business logic for training programs"""

    @staticmethod
    def create_full_program(
        db: Session,
        caller: CallerContext,
        document: Union[ProgramCreate, Mapping[str, Any]],
    ) -> ProgramCreateResult:
        """
        Create a program with all its days and exercise assignments as one unit.

        The program is attributed to the calling trainer. Days and assignments
        are inserted in document order with their caller-supplied order
        fields. Returns a tagged result; on any failure nothing is persisted.
        """

        def build(doc: ProgramCreate) -> int:
            ProgramService._check_preconditions(db, caller, doc)
            repo = ProgramRepository(db)

            program = repo.add_program(
                name=doc.name,
                description=doc.description,
                trainer_id=caller.profile_id,
                client_id=doc.client_id,
            )
            for day_doc in doc.days:
                day = repo.add_day(program.id, day_doc.name, day_doc.day_order)
                for ex in day_doc.exercises:
                    repo.add_assignment(
                        day.id,
                        exercise_id=ex.exercise_id,
                        sets=ex.sets,
                        reps=ex.reps,
                        rest_period_seconds=ex.rest_period_seconds,
                        exercise_order=ex.exercise_order,
                        notes=ex.notes,
                    )

            logger.info(
                f"program_tree_written program_id={program.id} trainer={caller.profile_id} "
                f"client={doc.client_id} days={len(doc.days)} "
                f"assignments={sum(len(d.exercises) for d in doc.days)}"
            )
            return program.id

        return run_composite_create(
            db,
            label="program",
            schema=ProgramCreate,
            document=document,
            build=build,
            result_cls=ProgramCreateResult,
            id_field="program_id",
        )

    @staticmethod
    def _check_preconditions(db: Session, caller: CallerContext, doc: ProgramCreate) -> None:
        AccessPolicy.require_trainer(caller)

        client = ProfileRepository(db).get_by_id(doc.client_id)
        if client is None or client.role != Role.CLIENT.value:
            raise NotFoundError(f"Client {doc.client_id} not found")
        AccessPolicy.require_roster_client(db, caller, doc.client_id)

        wanted = {ex.exercise_id for day in doc.days for ex in day.exercises}
        missing = wanted - ExerciseRepository(db).existing_ids(wanted)
        if missing:
            ids = ", ".join(str(i) for i in sorted(missing))
            raise NotFoundError(f"Unknown exercise id(s): {ids}")

    @staticmethod
    def list_programs(db: Session, caller: CallerContext) -> List[TrainingProgram]:
        """Programs authored by the calling trainer, newest first"""
        AccessPolicy.require_trainer(caller)
        return ProgramRepository(db).list_for_trainer(caller.profile_id)

    @staticmethod
    def get_program(db: Session, caller: CallerContext, program_id: int) -> TrainingProgram:
        program = ProgramRepository(db).get_tree(program_id)
        if program is None:
            raise NotFoundError(f"Program {program_id} not found")
        AccessPolicy.require_plan_party(caller, program)
        return program

    @staticmethod
    def get_assigned_program(db: Session, caller: CallerContext) -> Optional[TrainingProgram]:
        """The caller's most recent program as a client, or None"""
        return ProgramRepository(db).latest_tree_for_client(caller.profile_id)

    @staticmethod
    def get_training_day(db: Session, caller: CallerContext, day_id: int) -> TrainingDay:
        day = ProgramRepository(db).get_day(day_id)
        if day is None:
            raise NotFoundError(f"Training day {day_id} not found")
        AccessPolicy.require_plan_party(caller, day.program)
        return day

    @staticmethod
    def delete_program(db: Session, caller: CallerContext, program_id: int) -> bool:
        """Delete a program; its days and assignments go with it"""
        repo = ProgramRepository(db)
        program = repo.get_by_id(program_id)
        if program is None:
            return False
        AccessPolicy.require_plan_owner(caller, program)
        repo.delete(program_id)
        logger.info(f"program_deleted program_id={program_id} trainer={caller.profile_id}")
        return True
