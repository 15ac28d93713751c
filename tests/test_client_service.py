"""
Tests for the trainer roster: adding clients by e-mail and the roster reads.
"""

import pytest
from sqlalchemy import insert
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from test_fixtures import db_session, caller_for, link, make_client, make_trainer
from app.exceptions import ForbiddenError, NotFoundError
from domain.enums import AddClientOutcome, ResultStatus
from domain.models import ClientLink
from repositories import ClientLinkRepository
from services.client_service import ClientService


# =============================================================================
# ADD CLIENT BY EMAIL
# =============================================================================


def test_add_client_success(db_session: Session):
    trainer = make_trainer(db_session)
    client = make_client(db_session, email="sarah.martinez@example.com")

    result = ClientService.add_client_by_email(
        db_session, caller_for(trainer), "sarah.martinez@example.com"
    )

    assert result.status == ResultStatus.SUCCESS
    assert result.outcome == AddClientOutcome.SUCCESS
    assert result.message == "Client added successfully"
    assert result.client_id == client.id
    assert result.is_success
    assert db_session.query(ClientLink).count() == 1


def test_add_client_ignores_case_and_whitespace(db_session: Session):
    trainer = make_trainer(db_session)
    make_client(db_session, email="emma.johnson@example.com")

    result = ClientService.add_client_by_email(
        db_session, caller_for(trainer), "  Emma.Johnson@Example.COM "
    )

    assert result.outcome == AddClientOutcome.SUCCESS


def test_add_same_client_twice_is_already_exists(db_session: Session):
    """
    Verifies:
    - the second call reports already_exists with an error status
    - exactly one link row exists afterwards
    """
    trainer = make_trainer(db_session)
    client = make_client(db_session)

    first = ClientService.add_client_by_email(db_session, caller_for(trainer), client.email)
    second = ClientService.add_client_by_email(db_session, caller_for(trainer), client.email)

    assert first.outcome == AddClientOutcome.SUCCESS
    assert second.status == ResultStatus.ERROR
    assert second.outcome == AddClientOutcome.ALREADY_EXISTS
    assert second.message == "This client has already been added"
    assert db_session.query(ClientLink).count() == 1


def test_add_unknown_email_is_not_found(db_session: Session):
    trainer = make_trainer(db_session)

    result = ClientService.add_client_by_email(
        db_session, caller_for(trainer), "nobody@example.com"
    )

    assert result.outcome == AddClientOutcome.NOT_FOUND
    assert result.message == "No user found with this email"
    assert result.client_id is None


def test_add_trainer_email_is_wrong_role(db_session: Session):
    trainer = make_trainer(db_session)
    colleague = make_trainer(db_session, full_name="Michael Chen")

    result = ClientService.add_client_by_email(db_session, caller_for(trainer), colleague.email)

    assert result.outcome == AddClientOutcome.WRONG_ROLE
    assert db_session.query(ClientLink).count() == 0


def test_client_caller_is_forbidden(db_session: Session):
    client = make_client(db_session)
    other = make_client(db_session, full_name="Raj Patel")

    result = ClientService.add_client_by_email(db_session, caller_for(client), other.email)

    assert result.outcome == AddClientOutcome.FORBIDDEN
    assert result.status == ResultStatus.ERROR


def test_concurrent_insert_reported_as_already_exists(db_session: Session, monkeypatch):
    """
    Another request links the pair between the pre-check and the insert.

    The primary key rejects the second insert; the outcome is already_exists
    and the session stays usable.
    """
    trainer = make_trainer(db_session)
    client = make_client(db_session)
    caller = caller_for(trainer)

    db_session.execute(insert(ClientLink).values(trainer_id=trainer.id, client_id=client.id))
    db_session.commit()
    monkeypatch.setattr(ClientLinkRepository, "link_exists", lambda self, t, c: False)

    result = ClientService.add_client_by_email(db_session, caller, client.email)

    assert result.outcome == AddClientOutcome.ALREADY_EXISTS
    assert result.client_id == client.id
    assert db_session.query(ClientLink).count() == 1


def test_database_error_is_unexpected_error(db_session: Session, monkeypatch):
    trainer = make_trainer(db_session)
    client = make_client(db_session)

    def broken(self, email):
        raise OperationalError("SELECT", {}, Exception("server closed the connection"))

    monkeypatch.setattr("services.client_service.ProfileRepository.get_by_email", broken)

    result = ClientService.add_client_by_email(db_session, caller_for(trainer), client.email)

    assert result.outcome == AddClientOutcome.UNEXPECTED_ERROR
    assert result.message == "An unexpected error occurred"


# =============================================================================
# ROSTER READS
# =============================================================================


def test_list_and_remove_clients(db_session: Session):
    trainer = make_trainer(db_session)
    emma = make_client(db_session, full_name="Emma Johnson")
    raj = make_client(db_session, full_name="Raj Patel")
    link(db_session, trainer, raj)
    link(db_session, trainer, emma)

    roster = ClientService.list_clients(db_session, caller_for(trainer))
    assert [p.full_name for p in roster] == ["Emma Johnson", "Raj Patel"]

    assert ClientService.remove_client(db_session, caller_for(trainer), emma.id)
    assert ClientService.remove_client(db_session, caller_for(trainer), emma.id) is False
    assert [p.id for p in ClientService.list_clients(db_session, caller_for(trainer))] == [raj.id]

    with pytest.raises(ForbiddenError):
        ClientService.list_clients(db_session, caller_for(raj))


def test_get_my_trainer(db_session: Session):
    trainer = make_trainer(db_session)
    client = make_client(db_session)

    assert ClientService.get_my_trainer(db_session, caller_for(client)) is None

    link(db_session, trainer, client)
    assert ClientService.get_my_trainer(db_session, caller_for(client)).id == trainer.id


def test_get_profile_visibility(db_session: Session):
    trainer = make_trainer(db_session)
    client = make_client(db_session)
    stranger = make_client(db_session, full_name="Raj Patel")
    link(db_session, trainer, client)

    assert ClientService.get_profile(db_session, caller_for(trainer), client.id).id == client.id
    assert ClientService.get_profile(db_session, caller_for(client), trainer.id).id == trainer.id
    assert ClientService.get_profile(db_session, caller_for(client), client.id).id == client.id

    with pytest.raises(NotFoundError):
        ClientService.get_profile(db_session, caller_for(trainer), stranger.id)
    with pytest.raises(NotFoundError):
        ClientService.get_profile(db_session, caller_for(stranger), client.id)
