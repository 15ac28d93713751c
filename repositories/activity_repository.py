"""
Activity Repository - workout logs, progress photos and chat messages
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import WorkoutLog, ProgressPhoto, ChatMessage


class WorkoutLogRepository(BaseRepository[WorkoutLog]):
    """Append-only workout log access"""

    def __init__(self, db: Session):
        super().__init__(db, WorkoutLog)

    def list_for_client(
        self, client_id: UUID, program_exercise_id: Optional[int] = None
    ) -> List[WorkoutLog]:
        query = self.db.query(WorkoutLog).filter(WorkoutLog.client_id == client_id)
        if program_exercise_id is not None:
            query = query.filter(WorkoutLog.program_exercise_id == program_exercise_id)
        return query.order_by(WorkoutLog.log_date, WorkoutLog.set_number).all()


class ProgressPhotoRepository(BaseRepository[ProgressPhoto]):
    def __init__(self, db: Session):
        super().__init__(db, ProgressPhoto)

    def list_for_client(self, client_id: UUID) -> List[ProgressPhoto]:
        """Newest photo first"""
        return (
            self.db.query(ProgressPhoto)
            .filter(ProgressPhoto.client_id == client_id)
            .order_by(ProgressPhoto.taken_on.desc(), ProgressPhoto.id.desc())
            .all()
        )


class ChatRepository(BaseRepository[ChatMessage]):
    def __init__(self, db: Session):
        super().__init__(db, ChatMessage)

    def conversation(self, user_a: UUID, user_b: UUID) -> List[ChatMessage]:
        """Messages exchanged between two profiles, oldest first"""
        return (
            self.db.query(ChatMessage)
            .filter(
                or_(
                    and_(ChatMessage.sender_id == user_a, ChatMessage.receiver_id == user_b),
                    and_(ChatMessage.sender_id == user_b, ChatMessage.receiver_id == user_a),
                )
            )
            .order_by(ChatMessage.created_at, ChatMessage.id)
            .all()
        )
