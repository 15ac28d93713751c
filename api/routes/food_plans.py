"""Food plan routes"""

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
import logging
from typing import Any, Dict, List, Optional

from api.dependencies import get_db, get_caller
from api.responses import DeletedResponse, ERROR_RESPONSES, composite_response
from domain.caller import CallerContext
from domain.mappers import PlanMapper
from domain.schemas.food_plan_schemas import FoodPlanResponse, FoodPlanSummary
from domain.schemas.result_schemas import FoodPlanCreateResult
from services.food_plan_service import FoodPlanService
from app.exceptions import NotFoundError

router = APIRouter(tags=["Food plans"], responses=ERROR_RESPONSES)
logger = logging.getLogger("fitcoach.api.food_plans")


@router.post("/food-plans", response_model=FoodPlanCreateResult, status_code=201)
def create_food_plan(
    document: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """Create a food plan with its days, meals and items in one request."""
    result = FoodPlanService.create_full_food_plan(db, caller, document)
    return composite_response(result)


@router.get("/food-plans", response_model=List[FoodPlanSummary])
def list_food_plans(db: Session = Depends(get_db), caller: CallerContext = Depends(get_caller)):
    plans = FoodPlanService.list_food_plans(db, caller)
    return [PlanMapper.food_plan_to_summary(p) for p in plans]


@router.get("/food-plans/{plan_id}", response_model=FoodPlanResponse)
def get_food_plan(
    plan_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    return PlanMapper.food_plan_to_response(FoodPlanService.get_food_plan(db, caller, plan_id))


@router.delete("/food-plans/{plan_id}", response_model=DeletedResponse)
def delete_food_plan(
    plan_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    if not FoodPlanService.delete_food_plan(db, caller, plan_id):
        raise NotFoundError(f"Food plan {plan_id} not found")
    return DeletedResponse(removed=str(plan_id))


@router.get("/me/food-plan", response_model=Optional[FoodPlanResponse])
def get_my_food_plan(db: Session = Depends(get_db), caller: CallerContext = Depends(get_caller)):
    plan = FoodPlanService.get_assigned_food_plan(db, caller)
    return PlanMapper.food_plan_to_response(plan) if plan else None
