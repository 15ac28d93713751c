"""
Domain enums for FitCoach application.
Contains all enumeration types used across the domain models and results.
"""

import enum


class Role(str, enum.Enum):
    """Account role, fixed at registration"""

    TRAINER = "trainer"
    CLIENT = "client"


class ResultStatus(str, enum.Enum):
    """Top-level status of a tagged operation result"""

    SUCCESS = "success"
    ERROR = "error"


class AddClientOutcome(str, enum.Enum):
    """Outcomes of a trainer attaching a client by e-mail"""

    SUCCESS = "success"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    WRONG_ROLE = "wrong_role"
    FORBIDDEN = "forbidden"
    UNEXPECTED_ERROR = "unexpected_error"


class FailureCode(str, enum.Enum):
    """Classification of a failed composite create"""

    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    CONSTRAINT_VIOLATION = "constraint_violation"
    UNEXPECTED_ERROR = "unexpected_error"
