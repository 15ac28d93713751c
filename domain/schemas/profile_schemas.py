from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from domain.enums import AddClientOutcome, ResultStatus


class AccountCreatedEvent(BaseModel):
    """Payload the identity provider sends when an account is registered"""

    id: UUID
    email: str = Field(..., min_length=3)
    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Registration metadata; must carry 'full_name' and 'role'",
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class ProfileResponse(BaseModel):
    id: UUID
    full_name: Optional[str] = None
    email: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AddClientRequest(BaseModel):
    client_email: str = Field(..., description="E-mail of an existing client account")


class AddClientResult(BaseModel):
    """Tagged result of attaching a client; every branch is a normal value"""

    status: ResultStatus
    outcome: AddClientOutcome
    message: str
    client_id: Optional[UUID] = None

    @property
    def is_success(self) -> bool:
        return self.outcome == AddClientOutcome.SUCCESS
