"""
Row-level access rules, checked explicitly by the services.

Rules:
- a program or food plan (and every day/meal/item under it) is visible to its
  trainer and its client, and managed by its trainer only;
- a client's profile, photos and workout logs are visible to the client and to
  trainers who have the client on their roster;
- libraries are readable by everyone and extended by trainers.
"""

import logging
from uuid import UUID

from sqlalchemy.orm import Session

from app.exceptions import ForbiddenError
from domain.caller import CallerContext
from repositories import ClientLinkRepository

logger = logging.getLogger("fitcoach.policy")


class AccessPolicy:
    @staticmethod
    def require_trainer(caller: CallerContext) -> None:
        if not caller.is_trainer:
            logger.info(f"access_denied reason=not_trainer caller={caller.profile_id}")
            raise ForbiddenError("Only trainers can perform this operation")

    @staticmethod
    def require_client(caller: CallerContext) -> None:
        if not caller.is_client:
            logger.info(f"access_denied reason=not_client caller={caller.profile_id}")
            raise ForbiddenError("Only clients can perform this operation")

    @staticmethod
    def coaches(db: Session, trainer_id: UUID, client_id: UUID) -> bool:
        return ClientLinkRepository(db).link_exists(trainer_id, client_id)

    @staticmethod
    def require_roster_client(db: Session, caller: CallerContext, client_id: UUID) -> None:
        """Caller must be a trainer with ``client_id`` on their roster"""
        AccessPolicy.require_trainer(caller)
        if not AccessPolicy.coaches(db, caller.profile_id, client_id):
            logger.info(
                f"access_denied reason=not_on_roster caller={caller.profile_id} client={client_id}"
            )
            raise ForbiddenError("Client is not on your roster")

    @staticmethod
    def can_view_client_data(db: Session, caller: CallerContext, client_id: UUID) -> bool:
        if caller.profile_id == client_id:
            return True
        return caller.is_trainer and AccessPolicy.coaches(db, caller.profile_id, client_id)

    @staticmethod
    def require_client_data_access(db: Session, caller: CallerContext, client_id: UUID) -> None:
        if not AccessPolicy.can_view_client_data(db, caller, client_id):
            logger.info(
                f"access_denied reason=client_data caller={caller.profile_id} client={client_id}"
            )
            raise ForbiddenError()

    @staticmethod
    def can_view_profile(db: Session, caller: CallerContext, profile_id: UUID) -> bool:
        """Own profile, a roster client's profile, or the caller's own trainer"""
        if AccessPolicy.can_view_client_data(db, caller, profile_id):
            return True
        return caller.is_client and AccessPolicy.coaches(db, profile_id, caller.profile_id)

    @staticmethod
    def require_plan_party(caller: CallerContext, plan) -> None:
        """Caller is the trainer or the client of a program / food plan"""
        if caller.profile_id not in (plan.trainer_id, plan.client_id):
            logger.info(f"access_denied reason=plan_party caller={caller.profile_id} plan={plan.id}")
            raise ForbiddenError()

    @staticmethod
    def require_plan_owner(caller: CallerContext, plan) -> None:
        """Caller is the trainer who authored a program / food plan"""
        if caller.profile_id != plan.trainer_id:
            logger.info(f"access_denied reason=plan_owner caller={caller.profile_id} plan={plan.id}")
            raise ForbiddenError()
