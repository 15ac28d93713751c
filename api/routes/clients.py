"""Trainer roster and profile routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List, Optional

from api.dependencies import get_db, get_caller
from api.responses import ADD_CLIENT_STATUS, DeletedResponse, ERROR_RESPONSES, tagged_response
from domain.caller import CallerContext
from domain.schemas.profile_schemas import AddClientRequest, AddClientResult, ProfileResponse
from services.client_service import ClientService
from app.exceptions import NotFoundError

router = APIRouter(tags=["Clients"], responses=ERROR_RESPONSES)
logger = logging.getLogger("fitcoach.api.clients")


@router.post(
    "/clients",
    response_model=AddClientResult,
    status_code=201,
    responses={
        400: {"model": AddClientResult, "description": "Profile is not a client"},
        409: {"model": AddClientResult, "description": "Client already on the roster"},
    },
)
def add_client(
    payload: AddClientRequest,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """
    Attach an existing client to the caller's roster by e-mail.

    The body is always the tagged result; the status code mirrors its outcome.
    """
    result = ClientService.add_client_by_email(db, caller, payload.client_email)
    return tagged_response(result, ADD_CLIENT_STATUS[result.outcome])


@router.get("/clients", response_model=List[ProfileResponse])
def list_clients(db: Session = Depends(get_db), caller: CallerContext = Depends(get_caller)):
    clients = ClientService.list_clients(db, caller)
    return [ProfileResponse.model_validate(c) for c in clients]


@router.delete("/clients/{client_id}", response_model=DeletedResponse)
def remove_client(
    client_id: UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    if not ClientService.remove_client(db, caller, client_id):
        raise NotFoundError(f"Client {client_id} is not on your roster")
    return DeletedResponse(removed=str(client_id))


@router.get("/me", response_model=ProfileResponse)
def get_me(db: Session = Depends(get_db), caller: CallerContext = Depends(get_caller)):
    return ProfileResponse.model_validate(ClientService.get_profile(db, caller, caller.profile_id))


@router.get("/me/trainer", response_model=Optional[ProfileResponse])
def get_my_trainer(db: Session = Depends(get_db), caller: CallerContext = Depends(get_caller)):
    """The caller's trainer, or null when nobody has added them yet."""
    trainer = ClientService.get_my_trainer(db, caller)
    return ProfileResponse.model_validate(trainer) if trainer else None


@router.get("/profiles/{profile_id}", response_model=ProfileResponse)
def get_profile(
    profile_id: UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """A profile the caller is related to: self, a roster client or their trainer."""
    return ProfileResponse.model_validate(ClientService.get_profile(db, caller, profile_id))
