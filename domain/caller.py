"""
Explicit caller identity passed into every service operation.
"""

from dataclasses import dataclass
from uuid import UUID

from domain.enums import Role


@dataclass(frozen=True)
class CallerContext:
    """The authenticated profile on whose behalf an operation runs"""

    profile_id: UUID
    role: Role

    @property
    def is_trainer(self) -> bool:
        return self.role == Role.TRAINER

    @property
    def is_client(self) -> bool:
        return self.role == Role.CLIENT

    @classmethod
    def from_profile(cls, profile) -> "CallerContext":
        return cls(profile_id=profile.id, role=Role(profile.role))
