"""
Tests for composite program creation and the program read/delete operations.

Covers:
- the all-or-nothing insert of program -> days -> assignments
- document validation (numbers as text, malformed numbers)
- precondition failures mapped to tagged result codes
- ordering of days and assignments on read
- row-level access and cascade delete
"""

import uuid

import pytest
from sqlalchemy.orm import Session

from test_fixtures import (
    db_session,
    caller_for,
    link,
    make_client,
    make_exercise,
    make_trainer,
    program_document,
)
from app.exceptions import ForbiddenError, NotFoundError
from domain.enums import FailureCode, ResultStatus
from domain.mappers import PlanMapper
from domain.models import ProgramExercise, TrainingDay, TrainingProgram
from services.program_service import ProgramService


@pytest.fixture
def coached(db_session: Session):
    """A trainer with one client on the roster and three library exercises"""
    trainer = make_trainer(db_session)
    client = make_client(db_session)
    link(db_session, trainer, client)
    exercises = [
        make_exercise(db_session, name)
        for name in ("Barbell Bench Press", "Pull-up", "Back Squat")
    ]
    return trainer, client, exercises


def _count(db: Session, model) -> int:
    return db.query(model).count()


# =============================================================================
# CREATE
# =============================================================================


def test_create_full_program_writes_whole_tree(db_session: Session, coached):
    """
    Push/Pull/Legs with three exercises per day.

    Verifies:
    - success result carries the new program id
    - 1 program, 3 days and 9 assignments are stored
    - the program is attributed to the calling trainer
    """
    trainer, client, exercises = coached
    doc = program_document(client.id, [e.id for e in exercises])

    result = ProgramService.create_full_program(db_session, caller_for(trainer), doc)

    assert result.status == ResultStatus.SUCCESS
    assert result.is_success
    assert result.message == "Program created successfully"
    assert result.code is None
    assert result.program_id is not None

    program = db_session.get(TrainingProgram, result.program_id)
    assert program.name == "Push Pull Legs"
    assert program.trainer_id == trainer.id
    assert program.client_id == client.id
    assert _count(db_session, TrainingDay) == 3
    assert _count(db_session, ProgramExercise) == 9


def test_create_program_accepts_numbers_as_text(db_session: Session, coached):
    trainer, client, exercises = coached
    doc = program_document(client.id, [exercises[0].id])
    entry = doc["days"][0]["exercises"][0]
    entry.update(
        exercise_id=str(exercises[0].id),
        sets="4",
        reps=10,
        rest_period_seconds="120",
        exercise_order="1",
    )
    doc["days"][0]["day_order"] = "1"

    result = ProgramService.create_full_program(db_session, caller_for(trainer), doc)

    assert result.is_success
    program = ProgramService.get_program(db_session, caller_for(trainer), result.program_id)
    first = program.days[0].exercises[0]
    assert first.sets == 4
    assert first.reps == "10"
    assert first.rest_period_seconds == 120


def test_create_program_with_no_days(db_session: Session, coached):
    trainer, client, _ = coached
    doc = {"name": "Intake week", "client_id": str(client.id), "days": []}

    result = ProgramService.create_full_program(db_session, caller_for(trainer), doc)

    assert result.is_success
    assert _count(db_session, TrainingDay) == 0


@pytest.mark.parametrize(
    "field, value",
    [
        ("sets", "three"),
        ("rest_period_seconds", "1m30s"),
        ("exercise_id", "bench"),
        ("sets", -1),
        ("sets", True),
        ("exercise_order", False),
        ("rest_period_seconds", True),
    ],
)
def test_malformed_numbers_are_validation_errors(db_session: Session, coached, field, value):
    trainer, client, exercises = coached
    doc = program_document(client.id, [e.id for e in exercises])
    doc["days"][1]["exercises"][0][field] = value

    result = ProgramService.create_full_program(db_session, caller_for(trainer), doc)

    assert result.status == ResultStatus.ERROR
    assert result.code == FailureCode.VALIDATION_ERROR
    assert f"days.1.exercises.0.{field}" in result.message
    assert result.program_id is None
    assert _count(db_session, TrainingProgram) == 0


def test_missing_name_is_validation_error(db_session: Session, coached):
    trainer, client, exercises = coached
    doc = program_document(client.id, [exercises[0].id])
    del doc["name"]

    result = ProgramService.create_full_program(db_session, caller_for(trainer), doc)

    assert result.code == FailureCode.VALIDATION_ERROR
    assert "name" in result.message


def test_boolean_day_order_is_validation_error(db_session: Session, coached):
    trainer, client, exercises = coached
    doc = program_document(client.id, [exercises[0].id])
    doc["days"][0]["day_order"] = True

    result = ProgramService.create_full_program(db_session, caller_for(trainer), doc)

    assert result.code == FailureCode.VALIDATION_ERROR
    assert "days.0.day_order" in result.message
    assert _count(db_session, TrainingProgram) == 0


def test_two_day_program_stores_each_assignment(db_session: Session, coached):
    """
    Day 1: 3 x "8-12" of one exercise; day 2: 4 x "5" of another.

    Verifies:
    - exactly 2 day rows and 2 assignment rows
    - sets, reps and order are stored as sent, reps kept as text
    """
    trainer, client, exercises = coached
    bench, _, squat = exercises
    doc = {
        "name": "Strength base",
        "client_id": str(client.id),
        "days": [
            {
                "name": "Upper",
                "day_order": 1,
                "exercises": [
                    {"exercise_id": bench.id, "sets": 3, "reps": "8-12", "exercise_order": 1}
                ],
            },
            {
                "name": "Lower",
                "day_order": 2,
                "exercises": [
                    {"exercise_id": squat.id, "sets": 4, "reps": "5", "exercise_order": 1}
                ],
            },
        ],
    }

    result = ProgramService.create_full_program(db_session, caller_for(trainer), doc)

    assert result.is_success
    assert _count(db_session, TrainingDay) == 2
    assert _count(db_session, ProgramExercise) == 2

    program = ProgramService.get_program(db_session, caller_for(trainer), result.program_id)
    stored = [
        (day.name, ex.exercise_id, ex.sets, ex.reps, ex.exercise_order)
        for day in program.days
        for ex in day.exercises
    ]
    assert stored == [
        ("Upper", bench.id, 3, "8-12", 1),
        ("Lower", squat.id, 4, "5", 1),
    ]


def test_unknown_exercise_is_not_found_and_writes_nothing(db_session: Session, coached):
    trainer, client, exercises = coached
    doc = program_document(client.id, [exercises[0].id, 99999])

    result = ProgramService.create_full_program(db_session, caller_for(trainer), doc)

    assert result.code == FailureCode.NOT_FOUND
    assert "99999" in result.message
    assert _count(db_session, TrainingProgram) == 0
    assert _count(db_session, TrainingDay) == 0


def test_duplicate_slot_rolls_back_entire_tree(db_session: Session, coached):
    """
    The third day repeats an (exercise, order) slot, which violates the
    unique constraint after two days were already flushed.

    Verifies:
    - constraint_violation result
    - no program, day or assignment row survives
    - the session is usable afterwards
    """
    trainer, client, exercises = coached
    doc = program_document(client.id, [exercises[0].id, exercises[1].id])
    legs = doc["days"][2]["exercises"]
    legs[1]["exercise_id"] = legs[0]["exercise_id"]
    legs[1]["exercise_order"] = legs[0]["exercise_order"]

    result = ProgramService.create_full_program(db_session, caller_for(trainer), doc)

    assert result.status == ResultStatus.ERROR
    assert result.code == FailureCode.CONSTRAINT_VIOLATION
    assert _count(db_session, TrainingProgram) == 0
    assert _count(db_session, TrainingDay) == 0
    assert _count(db_session, ProgramExercise) == 0

    retry = ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(client.id, [exercises[0].id])
    )
    assert retry.is_success


def test_client_cannot_create_program(db_session: Session, coached):
    _, client, exercises = coached
    doc = program_document(client.id, [exercises[0].id])

    result = ProgramService.create_full_program(db_session, caller_for(client), doc)

    assert result.code == FailureCode.ACCESS_DENIED
    assert _count(db_session, TrainingProgram) == 0


def test_client_not_on_roster_is_access_denied(db_session: Session, coached):
    trainer, _, exercises = coached
    stranger = make_client(db_session, full_name="Emma Johnson")

    result = ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(stranger.id, [exercises[0].id])
    )

    assert result.code == FailureCode.ACCESS_DENIED


def test_unknown_client_is_not_found(db_session: Session, coached):
    trainer, _, exercises = coached

    result = ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(uuid.uuid4(), [exercises[0].id])
    )

    assert result.code == FailureCode.NOT_FOUND


def test_program_for_a_trainer_profile_is_not_found(db_session: Session, coached):
    trainer, _, exercises = coached
    colleague = make_trainer(db_session, full_name="Michael Chen")

    result = ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(colleague.id, [exercises[0].id])
    )

    assert result.code == FailureCode.NOT_FOUND
    assert result.message == f"Client {colleague.id} not found"
    assert _count(db_session, TrainingProgram) == 0


def test_unexpected_failure_is_tagged(db_session: Session, coached, monkeypatch):
    trainer, client, exercises = coached

    def boom(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr("services.program_service.ProgramRepository.add_day", boom)

    result = ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(client.id, [exercises[0].id])
    )

    assert result.code == FailureCode.UNEXPECTED_ERROR
    assert "disk on fire" in result.message
    assert _count(db_session, TrainingProgram) == 0


# =============================================================================
# READ / DELETE
# =============================================================================


def test_days_and_assignments_come_back_in_order(db_session: Session, coached):
    trainer, client, exercises = coached
    doc = {
        "name": "Upper/Lower",
        "client_id": str(client.id),
        "days": [
            {
                "name": "Lower",
                "day_order": 2,
                "exercises": [
                    {"exercise_id": exercises[2].id, "exercise_order": 2, "sets": 5},
                    {"exercise_id": exercises[0].id, "exercise_order": 1, "sets": 3},
                ],
            },
            {"name": "Upper", "day_order": 1, "exercises": []},
        ],
    }
    result = ProgramService.create_full_program(db_session, caller_for(trainer), doc)

    program = ProgramService.get_program(db_session, caller_for(client), result.program_id)

    assert [d.name for d in program.days] == ["Upper", "Lower"]
    lower = program.days[1]
    assert [a.exercise_order for a in lower.exercises] == [1, 2]
    assert lower.exercises[1].exercise.name == "Back Squat"

    response = PlanMapper.program_to_response(program)
    assert response.days[1].exercises[0].exercise.name == "Barbell Bench Press"


def test_get_program_hidden_from_unrelated_profiles(db_session: Session, coached):
    trainer, client, exercises = coached
    result = ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(client.id, [exercises[0].id])
    )
    other_trainer = make_trainer(db_session, full_name="Raj Patel")

    with pytest.raises(ForbiddenError):
        ProgramService.get_program(db_session, caller_for(other_trainer), result.program_id)

    with pytest.raises(NotFoundError):
        ProgramService.get_program(db_session, caller_for(trainer), 424242)


def test_assigned_program_is_latest_for_client(db_session: Session, coached):
    trainer, client, exercises = coached
    ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(client.id, [exercises[0].id], "Block 1")
    )
    ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(client.id, [exercises[1].id], "Block 2")
    )

    assigned = ProgramService.get_assigned_program(db_session, caller_for(client))

    assert assigned.name == "Block 2"
    assert len(assigned.days) == 3


def test_assigned_program_none_without_programs(db_session: Session):
    client = make_client(db_session)
    assert ProgramService.get_assigned_program(db_session, caller_for(client)) is None


def test_list_programs_includes_client_name(db_session: Session, coached):
    trainer, client, exercises = coached
    ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(client.id, [exercises[0].id])
    )

    programs = ProgramService.list_programs(db_session, caller_for(trainer))

    assert len(programs) == 1
    summary = PlanMapper.program_to_summary(programs[0])
    assert summary.client_name == "Sarah Martinez"

    with pytest.raises(ForbiddenError):
        ProgramService.list_programs(db_session, caller_for(client))


def test_get_training_day_scoped_by_program(db_session: Session, coached):
    trainer, client, exercises = coached
    result = ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(client.id, [exercises[0].id])
    )
    day_id = ProgramService.get_program(db_session, caller_for(trainer), result.program_id).days[0].id

    day = ProgramService.get_training_day(db_session, caller_for(client), day_id)
    assert day.name == "Push"

    outsider = make_client(db_session, full_name="Emma Johnson")
    with pytest.raises(ForbiddenError):
        ProgramService.get_training_day(db_session, caller_for(outsider), day_id)


def test_delete_program_cascades(db_session: Session, coached):
    trainer, client, exercises = coached
    result = ProgramService.create_full_program(
        db_session, caller_for(trainer), program_document(client.id, [e.id for e in exercises])
    )

    with pytest.raises(ForbiddenError):
        ProgramService.delete_program(db_session, caller_for(client), result.program_id)

    assert ProgramService.delete_program(db_session, caller_for(trainer), result.program_id)
    assert _count(db_session, TrainingProgram) == 0
    assert _count(db_session, TrainingDay) == 0
    assert _count(db_session, ProgramExercise) == 0

    assert ProgramService.delete_program(db_session, caller_for(trainer), result.program_id) is False
