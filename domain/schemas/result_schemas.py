from typing import Optional

from pydantic import BaseModel

from domain.enums import FailureCode, ResultStatus


class OperationResult(BaseModel):
    """Status-tagged outcome of a multi-row operation.

    Callers branch on ``status``; ``code`` classifies failures.
    """

    status: ResultStatus
    message: str
    code: Optional[FailureCode] = None

    @property
    def is_success(self) -> bool:
        return self.status == ResultStatus.SUCCESS


class ProgramCreateResult(OperationResult):
    program_id: Optional[int] = None


class FoodPlanCreateResult(OperationResult):
    food_plan_id: Optional[int] = None
