"""
Transaction runner shared by the composite create operations.

A composite create validates a nested document, writes a root row and its
ordered children inside the session transaction, and commits once. Any
failure rolls the whole tree back and comes out as a status-tagged result;
nothing is raised to the caller.
"""

import logging
from typing import Any, Callable, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import ForbiddenError, NotFoundError, ServiceValidationError
from domain.enums import FailureCode, ResultStatus
from domain.schemas.result_schemas import OperationResult

logger = logging.getLogger("fitcoach.composite")

DocT = TypeVar("DocT", bound=BaseModel)
ResultT = TypeVar("ResultT", bound=OperationResult)


def describe_validation_error(exc: ValidationError) -> str:
    """One line per offending field, e.g. ``days.0.exercises.1.sets: ...``"""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "document"
        parts.append(f"{loc}: {err.get('msg')}")
    return "Invalid document: " + "; ".join(parts)


def run_composite_create(
    db: Session,
    *,
    label: str,
    schema: Type[DocT],
    document: Union[DocT, Mapping[str, Any]],
    build: Callable[[DocT], int],
    result_cls: Type[ResultT],
    id_field: str,
) -> ResultT:
    """
    Validate ``document`` against ``schema`` and run ``build`` as one unit.

    ``build`` performs the checks and inserts and returns the new root id.
    """

    def failure(code: FailureCode, message: str) -> ResultT:
        return result_cls(status=ResultStatus.ERROR, code=code, message=message)

    try:
        doc = document if isinstance(document, schema) else schema.model_validate(document)
    except ValidationError as e:
        logger.warning(f"{label}_create_rejected reason=validation errors={e.error_count()}")
        return failure(FailureCode.VALIDATION_ERROR, describe_validation_error(e))

    try:
        root_id = build(doc)
        db.commit()
    except ForbiddenError as e:
        db.rollback()
        return failure(FailureCode.ACCESS_DENIED, str(e))
    except NotFoundError as e:
        db.rollback()
        logger.warning(f"{label}_create_rejected reason=not_found detail={e}")
        return failure(FailureCode.NOT_FOUND, str(e))
    except ServiceValidationError as e:
        db.rollback()
        logger.warning(f"{label}_create_rejected reason=validation detail={e}")
        return failure(FailureCode.VALIDATION_ERROR, str(e))
    except IntegrityError as e:
        db.rollback()
        logger.error(f"{label}_create_failed reason=constraint error={e.orig}")
        return failure(
            FailureCode.CONSTRAINT_VIOLATION,
            f"Could not create {label}: a constraint was violated ({e.orig})",
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"{label}_create_failed reason=database")
        return failure(FailureCode.UNEXPECTED_ERROR, f"Could not create {label}: {e}")
    except Exception as e:
        db.rollback()
        logger.exception(f"{label}_create_failed reason=unexpected")
        return failure(FailureCode.UNEXPECTED_ERROR, f"Could not create {label}: {e}")

    logger.info(f"{label}_created {id_field}={root_id}")
    return result_cls(
        status=ResultStatus.SUCCESS,
        message=f"{label.replace('_', ' ').capitalize()} created successfully",
        **{id_field: root_id},
    )
