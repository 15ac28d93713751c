"""
API dependencies for dependency injection
"""

import hmac
import logging
from typing import Generator
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.caller import CallerContext
from domain.models import get_db_session
from repositories import ProfileRepository
from services.nutrition_service import NutritionService

logger = logging.getLogger("fitcoach.api.auth")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_caller(request: Request, db: Session = Depends(get_db)) -> CallerContext:
    """
    Resolve the calling profile from the identity header.

    The identity provider sits in front of the API and forwards the
    authenticated account id; it is looked up here so every service receives
    the caller's id and role explicitly.
    """
    raw = request.headers.get(settings.identity_header)
    if not raw:
        raise UnauthorizedError(f"Missing {settings.identity_header} header")
    try:
        profile_id = UUID(raw)
    except ValueError:
        raise UnauthorizedError(f"Malformed {settings.identity_header} header")

    profile = ProfileRepository(db).get_by_id(profile_id)
    if profile is None:
        logger.info(f"caller_unknown profile_id={profile_id}")
        raise UnauthorizedError("No profile for the authenticated account")
    return CallerContext.from_profile(profile)


def require_hook_secret(request: Request) -> None:
    """Account hooks are only accepted from the identity provider"""
    expected = settings.account_hook_secret
    supplied = request.headers.get("X-Hook-Secret", "")
    if not expected or not hmac.compare_digest(supplied.encode(), expected.encode()):
        logger.warning("account_hook_rejected reason=bad_secret")
        raise UnauthorizedError("Invalid hook secret")


def get_nutrition_service() -> Generator[NutritionService, None, None]:
    service = NutritionService()
    try:
        yield service
    finally:
        service.close()
