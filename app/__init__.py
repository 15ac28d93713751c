"""
Settings and the FitCoach exception taxonomy.
"""

from app.config import settings
from app.exceptions import (
    FitCoachError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
    ForbiddenError,
    UpstreamServiceError,
    UpstreamTimeoutError,
)

__all__ = [
    "settings",
    "FitCoachError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
    "ForbiddenError",
    "UpstreamServiceError",
    "UpstreamTimeoutError",
]
