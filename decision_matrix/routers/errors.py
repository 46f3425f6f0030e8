"""
Error Responses - Decision Matrix
decision_matrix/routers/errors.py

Error body shared by every route plus the exception handlers registered in
main.py. Request validation errors are turned into one readable message for
the first offending field.
"""
from datetime import datetime, timezone
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from decision_matrix.core.exceptions import (
    ScoringException,
    ShapeMismatchException,
    UnknownArchetypeException,
    UnknownCohortSchemeException,
    UnknownScenarioException,
)

logger = structlog.get_logger(__name__)


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Optional[dict] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


#  Validation Messages


FACTOR_FIELDS = (
    "data_quality",
    "roi_visibility",
    "autonomy_scope",
    "time_pressure",
    "social_complexity",
    "psychological_safety",
)

FIELD_MESSAGES = {
    field: {
        "less_than_equal": f"{field} must be at most 1",
        "greater_than_equal": f"{field} must be at least 0",
        "missing": f"{field} is required",
    }
    for field in FACTOR_FIELDS
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "less_than_equal": "Field '{field}' exceeds maximum allowed value",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "finite_number": "Field '{field}' must be a finite number",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "json_invalid": "Malformed JSON request body",
    "extra_forbidden": "Unknown field '{field}' is not allowed",
}


def get_validation_message(field: str, error_type: str) -> str:
    if field in FIELD_MESSAGES:
        for key in FIELD_MESSAGES[field]:
            if key in error_type:
                return FIELD_MESSAGES[field][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


def _error(status_code: int, error_code: str, message: str, details: Optional[dict] = None) -> JSONResponse:
    body = ErrorResponse(error_code=error_code, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


#  Handlers


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", "Request validation failed")
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return _error(status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST", "Malformed JSON request body")
    field = ".".join(str(part) for part in loc if part not in ("body", "query", "path"))
    message = get_validation_message(field, error_type)
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        message,
        {"field": field, "type": error_type} if field else None,
    )


async def scoring_exception_handler(request: Request, exc: ScoringException):
    if isinstance(exc, UnknownArchetypeException):
        return _error(status.HTTP_404_NOT_FOUND, "UNKNOWN_ARCHETYPE", str(exc), {"archetype": exc.archetype})
    if isinstance(exc, UnknownScenarioException):
        return _error(status.HTTP_404_NOT_FOUND, "UNKNOWN_SCENARIO", str(exc), {"scenario": exc.scenario})
    if isinstance(exc, UnknownCohortSchemeException):
        return _error(status.HTTP_404_NOT_FOUND, "UNKNOWN_COHORT_SCHEME", str(exc), {"scheme": exc.scheme})
    if isinstance(exc, ShapeMismatchException):
        return _error(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "SHAPE_MISMATCH",
            str(exc),
            {"missing": exc.missing, "extra": exc.extra},
        )
    logger.error("scoring_error", path=request.url.path, error=str(exc))
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "SCORING_ERROR", str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ScoringException, scoring_exception_handler)
