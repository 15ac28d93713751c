from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from domain.caller import CallerContext
from domain.models import ProgressPhoto
from domain.schemas.activity_schemas import ProgressPhotoCreate
from repositories import ProgressPhotoRepository
from services.access_policy import AccessPolicy

logger = logging.getLogger("fitcoach.progress")


class ProgressService:
    """Progress photo metadata; the image bytes live in the blob store"""

    @staticmethod
    def save_photo(db: Session, caller: CallerContext, data: ProgressPhotoCreate) -> ProgressPhoto:
        AccessPolicy.require_client(caller)
        photo = ProgressPhotoRepository(db).create(
            ProgressPhoto(
                client_id=caller.profile_id,
                photo_url=data.photo_url,
                taken_on=data.taken_on,
                notes=data.notes,
            )
        )
        logger.info(f"progress_photo_saved photo_id={photo.id} client={caller.profile_id}")
        return photo

    @staticmethod
    def list_photos(
        db: Session, caller: CallerContext, client_id: Optional[UUID] = None
    ) -> List[ProgressPhoto]:
        client_id = client_id or caller.profile_id
        AccessPolicy.require_client_data_access(db, caller, client_id)
        return ProgressPhotoRepository(db).list_for_client(client_id)
