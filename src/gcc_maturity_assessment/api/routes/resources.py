"""FastAPI routes for the resource hub.

API prefix: /api/v1/resources
"""

from fastapi import APIRouter, Depends, Query, status

from gcc_maturity_assessment.api.routes.assessment import get_assessment_service
from gcc_maturity_assessment.api.schemas.assessment import ResourceSchema
from gcc_maturity_assessment.core.enums import Archetype, Dimension
from gcc_maturity_assessment.core.services.assessment_service import AssessmentService

router = APIRouter(prefix="/resources", tags=["Resource Hub"])


@router.get(
    "",
    response_model=list[ResourceSchema],
    status_code=status.HTTP_200_OK,
    summary="List resource hub content",
)
async def list_resources(
    archetype: Archetype | None = Query(default=None, description="Target archetype filter"),
    dimension: Dimension | None = Query(default=None, description="Target dimension filter"),
    service: AssessmentService = Depends(get_assessment_service),
) -> list[ResourceSchema]:
    """Return resources, optionally narrowed by archetype and dimension.

    Both filters combine with AND; with neither, every resource is returned.
    """
    resources = await service.list_resources(archetype=archetype, dimension=dimension)
    return [ResourceSchema.model_validate(r, from_attributes=True) for r in resources]
