"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints.
"""

from typing import Optional, Any
from datetime import datetime

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from domain.enums import AddClientOutcome, FailureCode, ResultStatus


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Error timestamp"
    )


class UpstreamErrorResponse(BaseModel):
    """Error body of the nutrition passthrough"""

    error: str


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Check timestamp"
    )


class DeletedResponse(BaseModel):
    status: str = "ok"
    removed: str


ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Caller could not be identified"},
    403: {"model": ErrorResponse, "description": "Access denied"},
    404: {"model": ErrorResponse, "description": "Not found"},
}

ADD_CLIENT_STATUS = {
    AddClientOutcome.SUCCESS: status.HTTP_201_CREATED,
    AddClientOutcome.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    AddClientOutcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    AddClientOutcome.WRONG_ROLE: status.HTTP_400_BAD_REQUEST,
    AddClientOutcome.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    AddClientOutcome.UNEXPECTED_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

FAILURE_STATUS = {
    FailureCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    FailureCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureCode.ACCESS_DENIED: status.HTTP_403_FORBIDDEN,
    FailureCode.CONSTRAINT_VIOLATION: status.HTTP_409_CONFLICT,
    FailureCode.UNEXPECTED_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def tagged_response(result: BaseModel, status_code: int) -> JSONResponse:
    """Render a status-tagged result as its own body"""
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))


def composite_response(result) -> JSONResponse:
    """201 for a created tree, otherwise the status matching the failure code"""
    if result.status == ResultStatus.SUCCESS:
        return tagged_response(result, status.HTTP_201_CREATED)
    code = FAILURE_STATUS.get(result.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return tagged_response(result, code)
