"""Top-level API router for the GCC Maturity Assessment service.

Aggregates the assessment and resource hub routes and exposes a liveness
probe. Mounted by ``main.py`` under /api/v1.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from gcc_maturity_assessment.api.routes.assessment import router as assessment_router
from gcc_maturity_assessment.api.routes.resources import router as resources_router
from gcc_maturity_assessment.api.schemas.assessment import HealthResponse

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Service"],
    summary="Liveness probe",
)
async def health() -> HealthResponse:
    """Report that the service is up."""
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))


router.include_router(assessment_router)
router.include_router(resources_router)
