"""
Exercise and food library models.
"""

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Uuid
from sqlalchemy.sql import func

from domain.models.database import Base, BigIntId


class Exercise(Base):
    """Library exercise; a null creator marks a global entry"""

    __tablename__ = "exercises"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    video_url = Column(Text)
    creator_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id", ondelete="SET NULL")
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())


class FoodItem(Base):
    """Library food, names only"""

    __tablename__ = "food_library"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    creator_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id", ondelete="SET NULL")
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
