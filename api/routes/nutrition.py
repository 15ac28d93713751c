"""Meal photo nutrition estimate"""

from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
import logging

from api.dependencies import get_caller, get_nutrition_service
from api.responses import UpstreamErrorResponse
from domain.caller import CallerContext
from domain.schemas.nutrition_schemas import NutritionEstimate, NutritionEstimateRequest
from services.nutrition_service import NutritionService
from app.exceptions import ServiceValidationError, UpstreamServiceError

router = APIRouter(prefix="/nutrition", tags=["Nutrition"])
logger = logging.getLogger("fitcoach.api.nutrition")


@router.post(
    "/estimate",
    response_model=NutritionEstimate,
    responses={
        400: {"model": UpstreamErrorResponse, "description": "No image or upstream failure"},
        504: {"model": UpstreamErrorResponse, "description": "Upstream timed out"},
    },
)
def estimate_nutrition(
    payload: Optional[NutritionEstimateRequest] = Body(None),
    caller: CallerContext = Depends(get_caller),
    service: NutritionService = Depends(get_nutrition_service),
):
    """
    Estimate calories, protein, carbohydrates and fat of a photographed meal.

    Errors come back as ``{"error": "<message>"}``; a request without a body is
    treated like one without an image.
    """
    try:
        return service.estimate(payload.image if payload else None)
    except (ServiceValidationError, UpstreamServiceError) as e:
        logger.warning(f"nutrition_estimate_failed caller={caller.profile_id} error={e}")
        return JSONResponse(status_code=e.http_status, content={"error": e.message})
