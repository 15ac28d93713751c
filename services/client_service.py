from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from domain.caller import CallerContext
from domain.enums import AddClientOutcome, ResultStatus, Role
from domain.models import Profile
from domain.schemas.profile_schemas import AddClientResult
from repositories import ProfileRepository, ClientLinkRepository
from services.access_policy import AccessPolicy
from app.exceptions import NotFoundError

logger = logging.getLogger("fitcoach.clients")

MESSAGES = {
    AddClientOutcome.SUCCESS: "Client added successfully",
    AddClientOutcome.ALREADY_EXISTS: "This client has already been added",
    AddClientOutcome.NOT_FOUND: "No user found with this email",
    AddClientOutcome.WRONG_ROLE: "The user found is not a client",
    AddClientOutcome.FORBIDDEN: "Only trainers can add clients",
    AddClientOutcome.UNEXPECTED_ERROR: "An unexpected error occurred",
}


def _result(outcome: AddClientOutcome, client_id: Optional[UUID] = None) -> AddClientResult:
    status = ResultStatus.SUCCESS if outcome == AddClientOutcome.SUCCESS else ResultStatus.ERROR
    return AddClientResult(
        status=status, outcome=outcome, message=MESSAGES[outcome], client_id=client_id
    )


class ClientService:
    """Trainer roster management"""

    @staticmethod
    def add_client_by_email(db: Session, caller: CallerContext, client_email: str) -> AddClientResult:
        """
        Attach an existing client account to the calling trainer's roster.

        Every branch returns a tagged result. The duplicate check runs before
        the insert; a concurrent insert of the same pair that slips past it
        hits the primary key and is reported as ``already_exists`` too.
        """
        if not caller.is_trainer:
            return _result(AddClientOutcome.FORBIDDEN)

        try:
            client = ProfileRepository(db).get_by_email(client_email or "")
            if client is None:
                return _result(AddClientOutcome.NOT_FOUND)
            if client.role != Role.CLIENT.value:
                return _result(AddClientOutcome.WRONG_ROLE)

            links = ClientLinkRepository(db)
            if links.link_exists(caller.profile_id, client.id):
                return _result(AddClientOutcome.ALREADY_EXISTS, client.id)

            client_id = client.id
            try:
                links.add_link(caller.profile_id, client_id)
                db.commit()
            except IntegrityError:
                db.rollback()
                logger.info(
                    f"client_link_race trainer={caller.profile_id} client={client_id}"
                )
                return _result(AddClientOutcome.ALREADY_EXISTS, client_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"client_add_failed trainer={caller.profile_id} error={e}")
            return _result(AddClientOutcome.UNEXPECTED_ERROR)

        logger.info(f"client_added trainer={caller.profile_id} client={client_id}")
        return _result(AddClientOutcome.SUCCESS, client_id)

    @staticmethod
    def list_clients(db: Session, caller: CallerContext) -> List[Profile]:
        AccessPolicy.require_trainer(caller)
        return ClientLinkRepository(db).list_clients(caller.profile_id)

    @staticmethod
    def remove_client(db: Session, caller: CallerContext, client_id: UUID) -> bool:
        AccessPolicy.require_trainer(caller)
        removed = ClientLinkRepository(db).remove_link(caller.profile_id, client_id)
        if removed:
            logger.info(f"client_removed trainer={caller.profile_id} client={client_id}")
        return removed

    @staticmethod
    def get_my_trainer(db: Session, caller: CallerContext) -> Optional[Profile]:
        """The calling client's trainer profile, if linked"""
        return ClientLinkRepository(db).get_trainer(caller.profile_id)

    @staticmethod
    def get_profile(db: Session, caller: CallerContext, profile_id: UUID) -> Profile:
        profile = ProfileRepository(db).get_by_id(profile_id)
        if profile is None or not AccessPolicy.can_view_profile(db, caller, profile_id):
            # Same answer for hidden and missing rows
            raise NotFoundError(f"Profile {profile_id} not found")
        return profile
