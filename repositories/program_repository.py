"""
Program Repository - training programs, days and exercise assignments
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload, selectinload

from repositories.base import BaseRepository
from domain.models import TrainingProgram, TrainingDay, ProgramExercise


def _tree_options():
    return (
        selectinload(TrainingProgram.days)
        .selectinload(TrainingDay.exercises)
        .joinedload(ProgramExercise.exercise),
    )


class ProgramRepository(BaseRepository[TrainingProgram]):
    """
    Repository layer for training program data access.

    The ``add_*`` methods flush so the generated id is available to the next
    level of the tree; the caller owns commit and rollback.
    """

    def __init__(self, db: Session):
        super().__init__(db, TrainingProgram)

    def add_program(
        self,
        name: str,
        description: Optional[str],
        trainer_id: UUID,
        client_id: UUID,
    ) -> TrainingProgram:
        program = TrainingProgram(
            name=name,
            description=description,
            trainer_id=trainer_id,
            client_id=client_id,
        )
        return self.stage(program)

    def add_day(self, program_id: int, name: str, day_order: Optional[int]) -> TrainingDay:
        day = TrainingDay(program_id=program_id, name=name, day_order=day_order)
        return self.stage(day)

    def add_assignment(self, day_id: int, **fields) -> ProgramExercise:
        assignment = ProgramExercise(day_id=day_id, **fields)
        return self.stage(assignment)

    def get_tree(self, program_id: int) -> Optional[TrainingProgram]:
        """Program with days and assignments (and their exercises) loaded"""
        return (
            self.db.query(TrainingProgram)
            .options(*_tree_options())
            .filter(TrainingProgram.id == program_id)
            .first()
        )

    def latest_tree_for_client(self, client_id: UUID) -> Optional[TrainingProgram]:
        return (
            self.db.query(TrainingProgram)
            .options(*_tree_options())
            .filter(TrainingProgram.client_id == client_id)
            .order_by(TrainingProgram.created_at.desc(), TrainingProgram.id.desc())
            .first()
        )

    def list_for_trainer(self, trainer_id: UUID) -> List[TrainingProgram]:
        """Trainer's programs, newest first, with the client loaded"""
        return (
            self.db.query(TrainingProgram)
            .options(joinedload(TrainingProgram.client))
            .filter(TrainingProgram.trainer_id == trainer_id)
            .order_by(TrainingProgram.created_at.desc(), TrainingProgram.id.desc())
            .all()
        )

    def get_day(self, day_id: int) -> Optional[TrainingDay]:
        return (
            self.db.query(TrainingDay)
            .options(
                joinedload(TrainingDay.program),
                selectinload(TrainingDay.exercises).joinedload(ProgramExercise.exercise),
            )
            .filter(TrainingDay.id == day_id)
            .first()
        )

    def get_assignment(self, assignment_id: int) -> Optional[ProgramExercise]:
        return (
            self.db.query(ProgramExercise)
            .options(joinedload(ProgramExercise.day).joinedload(TrainingDay.program))
            .filter(ProgramExercise.id == assignment_id)
            .first()
        )
