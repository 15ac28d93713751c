from typing import List
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from domain.caller import CallerContext
from domain.models import ChatMessage
from domain.schemas.activity_schemas import ChatMessageCreate
from repositories import ChatRepository, ProfileRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("fitcoach.chat")


class ChatService:
    @staticmethod
    def send_message(db: Session, caller: CallerContext, data: ChatMessageCreate) -> ChatMessage:
        """Store a message from the caller; the receiver must be a known profile"""
        if ProfileRepository(db).get_by_id(data.receiver_id) is None:
            raise NotFoundError(f"Profile {data.receiver_id} not found")

        message = ChatRepository(db).create(
            ChatMessage(
                sender_id=caller.profile_id,
                receiver_id=data.receiver_id,
                message_text=data.message_text,
            )
        )
        logger.info(
            f"message_sent message_id={message.id} sender={caller.profile_id} "
            f"receiver={data.receiver_id}"
        )
        return message

    @staticmethod
    def get_conversation(db: Session, caller: CallerContext, other_id: UUID) -> List[ChatMessage]:
        return ChatRepository(db).conversation(caller.profile_id, other_id)
