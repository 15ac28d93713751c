from typing import Any, Mapping, Optional


class FitCoachError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal error"
    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(FitCoachError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"
    error_code = "SERVICE_VALIDATION_ERROR"


class UnauthorizedError(FitCoachError):
    """Raised when the caller cannot be identified."""

    http_status = 401
    default_message = "Unauthorized"
    error_code = "UNAUTHORIZED"


class ForbiddenError(FitCoachError):
    """Raised when an identified caller is not allowed to touch a row.

    Stands in for the row-level policy layer: the message never reveals
    whether the row exists.
    """

    http_status = 403
    default_message = "Access denied"
    error_code = "FORBIDDEN"


class NotFoundError(FitCoachError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_message = "Not found"
    error_code = "NOT_FOUND"


class ConflictError(FitCoachError):
    """Raised when a resource conflict occurs (e.g., duplicate entry)."""

    http_status = 409
    default_message = "Conflict"
    error_code = "CONFLICT"


class UpstreamServiceError(FitCoachError):
    """Raised when the vision/LLM upstream fails or replies with something unusable.

    Reported as a client error (400) carrying the upstream text.
    """

    http_status = 400
    default_message = "Upstream service error"
    error_code = "UPSTREAM_ERROR"


class UpstreamTimeoutError(UpstreamServiceError):
    """Raised when the upstream call exceeds its time budget."""

    http_status = 504
    default_message = "Upstream service timed out"
    error_code = "UPSTREAM_TIMEOUT"
