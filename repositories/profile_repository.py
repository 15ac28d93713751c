"""
Profile Repository - Data access layer for profiles and trainer/client links
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Profile, ClientLink


class ProfileRepository(BaseRepository[Profile]):
    """Repository for profile data access"""

    def __init__(self, db: Session):
        super().__init__(db, Profile)

    def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by e-mail, ignoring case and surrounding whitespace"""
        normalized = email.strip().lower()
        return (
            self.db.query(Profile)
            .filter(func.lower(Profile.email) == normalized)
            .first()
        )

    def add_profile(
        self, profile_id: UUID, email: str, full_name: Optional[str], role: str
    ) -> Profile:
        """Stage a new profile (flush only)"""
        profile = Profile(id=profile_id, email=email, full_name=full_name, role=role)
        return self.stage(profile)


class ClientLinkRepository(BaseRepository[ClientLink]):
    """Repository for the trainer/client roster"""

    def __init__(self, db: Session):
        super().__init__(db, ClientLink)

    def link_exists(self, trainer_id: UUID, client_id: UUID) -> bool:
        return (
            self.db.query(ClientLink.client_id)
            .filter(
                ClientLink.trainer_id == trainer_id,
                ClientLink.client_id == client_id,
            )
            .first()
            is not None
        )

    def add_link(self, trainer_id: UUID, client_id: UUID) -> ClientLink:
        """Stage a new link (flush only); raises IntegrityError on a duplicate pair"""
        link = ClientLink(trainer_id=trainer_id, client_id=client_id)
        return self.stage(link)

    def remove_link(self, trainer_id: UUID, client_id: UUID) -> bool:
        count = (
            self.db.query(ClientLink)
            .filter(
                ClientLink.trainer_id == trainer_id,
                ClientLink.client_id == client_id,
            )
            .delete()
        )
        self.db.commit()
        return count > 0

    def list_clients(self, trainer_id: UUID) -> List[Profile]:
        """Profiles on a trainer's roster, by name"""
        return (
            self.db.query(Profile)
            .join(ClientLink, ClientLink.client_id == Profile.id)
            .filter(ClientLink.trainer_id == trainer_id)
            .order_by(Profile.full_name)
            .all()
        )

    def get_trainer(self, client_id: UUID) -> Optional[Profile]:
        """The client's trainer; the earliest link wins if there are several"""
        return (
            self.db.query(Profile)
            .join(ClientLink, ClientLink.trainer_id == Profile.id)
            .filter(ClientLink.client_id == client_id)
            .order_by(ClientLink.created_at, ClientLink.trainer_id)
            .first()
        )
