"""Account lifecycle hooks called by the identity provider"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db, require_hook_secret
from api.responses import DeletedResponse, ErrorResponse
from domain.schemas.profile_schemas import AccountCreatedEvent, ProfileResponse
from services.account_service import AccountService
from app.exceptions import NotFoundError

router = APIRouter(
    prefix="/accounts/hooks",
    tags=["Accounts"],
    dependencies=[Depends(require_hook_secret)],
    responses={401: {"model": ErrorResponse}},
)
logger = logging.getLogger("fitcoach.api.accounts")


@router.post(
    "/created",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def account_created(event: AccountCreatedEvent, db: Session = Depends(get_db)):
    """Provision the profile for a newly registered account."""
    profile = AccountService.provision_profile(db, event)
    return ProfileResponse.model_validate(profile)


@router.delete("/{profile_id}", response_model=DeletedResponse)
def account_deleted(profile_id: UUID, db: Session = Depends(get_db)):
    """Remove the profile of a deleted account together with everything it owns."""
    if not AccountService.delete_account(db, profile_id):
        raise NotFoundError(f"Profile {profile_id} not found")
    return DeletedResponse(removed=str(profile_id))
