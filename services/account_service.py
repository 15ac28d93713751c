from uuid import UUID
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from domain.enums import Role
from domain.models import Profile
from domain.schemas.profile_schemas import AccountCreatedEvent
from repositories import ProfileRepository
from app.exceptions import ConflictError, ServiceValidationError

logger = logging.getLogger("fitcoach.account")

ACCEPTED_ROLES = {r.value for r in Role}


class AccountService:
    """Account lifecycle hooks invoked by the identity provider"""

    @staticmethod
    def provision_profile(db: Session, event: AccountCreatedEvent) -> Profile:
        """
        Create the one Profile that backs a newly registered account.

        ``id`` and ``email`` come from the account; ``full_name`` and ``role``
        from the registration metadata. A missing or unknown role fails the
        registration instead of leaving a profile-less account behind.

        Raises:
            ServiceValidationError: role absent or not trainer/client
            ConflictError: a profile already exists for this id or e-mail
        """
        role = event.metadata.get("role")
        full_name = event.metadata.get("full_name")

        if isinstance(role, str):
            role = role.strip().lower()
        if role not in ACCEPTED_ROLES:
            logger.warning(f"registration_rejected account_id={event.id} role={role!r}")
            raise ServiceValidationError(
                "Registration failed: metadata 'role' must be 'trainer' or 'client'",
                details={"role": role},
            )

        repo = ProfileRepository(db)
        if repo.get_by_id(event.id) is not None or repo.get_by_email(event.email) is not None:
            raise ConflictError(f"A profile already exists for account {event.id}")

        try:
            profile = repo.add_profile(event.id, event.email, full_name, role)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.error(f"registration_failed account_id={event.id} error={e.orig}")
            raise ServiceValidationError(f"Registration failed: {e.orig}")

        db.refresh(profile)
        logger.info(f"profile_provisioned profile_id={profile.id} role={role}")
        return profile

    @staticmethod
    def delete_account(db: Session, profile_id: UUID) -> bool:
        """Remove a profile and, by cascade, everything it owns"""
        deleted = ProfileRepository(db).delete(profile_id)
        if deleted:
            logger.info(f"profile_deleted profile_id={profile_id}")
        return deleted
