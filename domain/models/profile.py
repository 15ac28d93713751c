"""
Profile and trainer/client link models.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    CheckConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Profile(Base):
    """Application-level user record, one per identity account"""

    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint("role IN ('trainer', 'client')", name="ck_profiles_role"),
    )

    # Supplied by the identity collaborator, never generated here
    id = Column(Uuid(as_uuid=True), primary_key=True)
    full_name = Column(Text)
    email = Column(Text, unique=True)
    role = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    client_links = relationship(
        "ClientLink",
        foreign_keys="ClientLink.trainer_id",
        back_populates="trainer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    trainer_links = relationship(
        "ClientLink",
        foreign_keys="ClientLink.client_id",
        back_populates="client",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ClientLink(Base):
    """Which trainer coaches which client"""

    __tablename__ = "clients"

    trainer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    client_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    trainer = relationship(
        "Profile", foreign_keys=[trainer_id], back_populates="client_links"
    )
    client = relationship(
        "Profile", foreign_keys=[client_id], back_populates="trainer_links"
    )
