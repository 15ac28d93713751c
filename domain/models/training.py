"""
Training program models: program -> day -> exercise assignment, plus workout logs.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Integer,
    Numeric,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base, BigIntId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TrainingProgram(Base):
    """A client's workout plan, authored by one trainer"""

    __tablename__ = "training_programs"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    trainer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    client_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    trainer = relationship("Profile", foreign_keys=[trainer_id])
    client = relationship("Profile", foreign_keys=[client_id])
    days = relationship(
        "TrainingDay",
        back_populates="program",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[TrainingDay.day_order, TrainingDay.id]",
    )


class TrainingDay(Base):
    """e.g. "Day A: Push", "Day B: Pull" """

    __tablename__ = "training_days"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    program_id = Column(
        BigIntId,
        ForeignKey("training_programs.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    day_order = Column(Integer)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    program = relationship("TrainingProgram", back_populates="days")
    exercises = relationship(
        "ProgramExercise",
        back_populates="day",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[ProgramExercise.exercise_order, ProgramExercise.id]",
    )


class ProgramExercise(Base):
    """Sets, reps and rest for one exercise on a given day"""

    __tablename__ = "program_exercises"
    __table_args__ = (
        UniqueConstraint(
            "day_id", "exercise_id", "exercise_order", name="uq_program_exercise_slot"
        ),
    )

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    day_id = Column(
        BigIntId,
        ForeignKey("training_days.id", ondelete="CASCADE"),
        nullable=False,
    )
    exercise_id = Column(
        BigIntId,
        ForeignKey("exercises.id", ondelete="CASCADE"),
        nullable=False,
    )
    sets = Column(Integer)
    reps = Column(Text)  # free-form, allows ranges like "8-12"
    rest_period_seconds = Column(Integer)
    notes = Column(Text)
    exercise_order = Column(Integer)

    day = relationship("TrainingDay", back_populates="exercises")
    exercise = relationship("Exercise")


class WorkoutLog(Base):
    """One completed set logged by a client during a session"""

    __tablename__ = "workout_logs"
    __table_args__ = (
        # log_date defaults to now, so repeated submissions of a set rarely collide
        UniqueConstraint(
            "program_exercise_id",
            "client_id",
            "set_number",
            "log_date",
            name="uq_workout_log_set",
        ),
    )

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    program_exercise_id = Column(
        BigIntId,
        ForeignKey("program_exercises.id", ondelete="CASCADE"),
        nullable=False,
    )
    client_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    set_number = Column(Integer, nullable=False)
    reps_completed = Column(Integer)
    weight_used = Column(Numeric)
    log_date = Column(
        TIMESTAMP(timezone=True), default=_utcnow, server_default=func.now()
    )

    program_exercise = relationship("ProgramExercise")
