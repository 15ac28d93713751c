"""
Client activity models: progress photos and chat messages.
"""

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Date, Uuid
from sqlalchemy.sql import func

from domain.models.database import Base, BigIntId


class ProgressPhoto(Base):
    """Metadata of a photo held by the external blob store"""

    __tablename__ = "progress_photos"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    client_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    photo_url = Column(Text, nullable=False)
    taken_on = Column(Date, nullable=False)
    notes = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())


class ChatMessage(Base):
    """Immutable message between two profiles"""

    __tablename__ = "chat_messages"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    sender_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    receiver_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    message_text = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
