"""
Health Check Router - Decision Matrix
decision_matrix/routers/health.py

The service has no external dependencies. Health re-reads the archetype
description data from disk and checks that every catalogued type has a
valid entry.
"""
import json
from datetime import datetime, timezone
from typing import Dict

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from decision_matrix.config import settings
from decision_matrix.mbti import registry
from decision_matrix.models.archetype import MBTIDescription
from decision_matrix.models.enumerations import MBTIType

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]


def check_archetype_catalog() -> str:
    """Check that the description file loads and covers all sixteen types."""
    try:
        raw = json.loads(registry.DESCRIPTIONS_PATH.read_text(encoding="utf-8"))
        missing = [t.value for t in MBTIType if t.value not in raw]
        if missing:
            return f"unhealthy: Missing descriptions: {', '.join(missing)}"
        for t in MBTIType:
            MBTIDescription.model_validate(raw[t.value])
        return f"healthy ({len(MBTIType)} archetypes)"
    except Exception as e:
        logger.error("catalog_check_failed", error=str(e))
        return f"unhealthy: {str(e)[:100]}"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        200: {"description": "Archetype catalog healthy"},
        503: {"description": "Archetype catalog unavailable"},
    },
    summary="Health check",
    description="Report service status and whether the archetype catalog loads.",
)
async def health_check():
    dependencies = {"archetype_catalog": check_archetype_catalog()}
    all_healthy = all(v.startswith("healthy") for v in dependencies.values())

    response = HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        dependencies=dependencies,
    )

    if all_healthy:
        return response
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=response.model_dump(mode="json"),
    )
