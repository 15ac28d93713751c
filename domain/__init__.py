"""
Domain layer - Business entities, models, schemas, and enums.
"""

from domain import enums, models, schemas
from domain.caller import CallerContext

__all__ = ["enums", "models", "schemas", "CallerContext"]
