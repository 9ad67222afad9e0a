"""FastAPI routes for the GCC maturity assessment workflow.

All routes are thin: they parse inputs, build dependencies, delegate to
AssessmentService, and serialise responses. No business logic lives here.

API prefix: /api/v1/assessments
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from gcc_maturity_assessment.adapters.repositories.assessment_repository import (
    AssessmentRepository,
    BusinessQueryRepository,
    QuestionRepository,
    RecommendationRepository,
    ResourceRepository,
    ResponseRepository,
)
from gcc_maturity_assessment.api.schemas.assessment import (
    MAX_RECORD_ID,
    AssessmentResultsResponse,
    AssessmentSchema,
    BusinessQuerySchema,
    CreateAssessmentRequest,
    CreateBusinessQueryRequest,
    ErrorResponse,
    QuestionSchema,
    RecommendationSchema,
    SubmitResponsesRequest,
)
from gcc_maturity_assessment.core.errors import (
    ErrorCode,
    MaturityAssessmentError,
)
from gcc_maturity_assessment.core.services.assessment_service import (
    AssessmentService,
    ResponseSubmission,
)
from gcc_maturity_assessment.database import get_db_session
from gcc_maturity_assessment.observability import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/assessments", tags=["Maturity Assessment"])

_STATUS_BY_ERROR_CODE: dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_RESPONSE_VALUE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.DUPLICATE_RESPONSE: status.HTTP_409_CONFLICT,
}


# ---------------------------------------------------------------------------
# Dependency factory
# ---------------------------------------------------------------------------


def get_assessment_service(
    session: AsyncSession = Depends(get_db_session),
) -> AssessmentService:
    """Build AssessmentService with injected repository dependencies.

    Args:
        session: Transactional async SQLAlchemy session for this request.

    Returns:
        Configured AssessmentService instance.
    """
    return AssessmentService(
        assessment_repository=AssessmentRepository(session),
        question_repository=QuestionRepository(session),
        response_repository=ResponseRepository(session),
        recommendation_repository=RecommendationRepository(session),
        business_query_repository=BusinessQueryRepository(session),
        resource_repository=ResourceRepository(session),
    )


def _to_http_exception(exc: MaturityAssessmentError) -> HTTPException:
    """Map a service error to the HTTP error returned to the caller."""
    logger.warning("Request rejected", error_code=exc.error_code.value, detail=exc.message)
    return HTTPException(
        status_code=_STATUS_BY_ERROR_CODE.get(
            exc.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        ),
        detail=ErrorResponse(error_code=exc.error_code.value, detail=exc.message).model_dump(),
    )


# ---------------------------------------------------------------------------
# Assessment lifecycle endpoints
# ---------------------------------------------------------------------------


@router.post(
    "",
    response_model=AssessmentSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Register a GCC for maturity assessment",
)
async def create_assessment(
    body: CreateAssessmentRequest,
    service: AssessmentService = Depends(get_assessment_service),
) -> AssessmentSchema:
    """Create an assessment from the organisation intake details.

    Scores and archetype are null until responses are submitted.
    """
    assessment = await service.create_assessment(
        gcc_name=body.gcc_name,
        contact_email=str(body.contact_email),
        annual_productivity_upliftment=body.annual_productivity_upliftment,
        attrition_rate=body.attrition_rate,
        genai_use_cases_developed=body.genai_use_cases_developed,
    )
    return AssessmentSchema.model_validate(assessment, from_attributes=True)


@router.get(
    "/questions",
    response_model=list[QuestionSchema],
    status_code=status.HTTP_200_OK,
    summary="List the assessment questionnaire",
)
async def list_questions(
    service: AssessmentService = Depends(get_assessment_service),
) -> list[QuestionSchema]:
    """Return every question, grouped by dimension in canonical order."""
    questions = await service.list_questions()
    return [QuestionSchema.model_validate(q, from_attributes=True) for q in questions]


@router.post(
    "/{assessment_id}/responses",
    response_model=AssessmentSchema,
    status_code=status.HTTP_200_OK,
    summary="Submit answers and score the assessment",
)
async def submit_responses(
    body: SubmitResponsesRequest,
    assessment_id: int = Path(..., ge=1, le=MAX_RECORD_ID, description="Assessment id"),
    service: AssessmentService = Depends(get_assessment_service),
) -> AssessmentSchema:
    """Store answers and recompute every score and the archetype.

    Answers are accepted on a 1-5 scale. The submission is all-or-nothing:
    an unknown assessment or question, or a question answered twice, stores
    nothing.
    """
    try:
        assessment = await service.submit_responses(
            assessment_id=assessment_id,
            responses=[
                ResponseSubmission(
                    question_id=item.question_id,
                    response_value=item.response_value,
                )
                for item in body.responses
            ],
        )
    except MaturityAssessmentError as exc:
        raise _to_http_exception(exc) from exc

    return AssessmentSchema.model_validate(assessment, from_attributes=True)


@router.post(
    "/{assessment_id}/recommendations",
    response_model=list[RecommendationSchema],
    status_code=status.HTTP_201_CREATED,
    summary="Generate recommendations for an assessment",
)
async def generate_recommendations(
    assessment_id: int = Path(..., ge=1, le=MAX_RECORD_ID, description="Assessment id"),
    service: AssessmentService = Depends(get_assessment_service),
) -> list[RecommendationSchema]:
    """Run the recommendation rules against the stored scores.

    Each call stores a new batch; repeated calls produce duplicate rows.
    """
    try:
        recommendations = await service.generate_recommendations(assessment_id)
    except MaturityAssessmentError as exc:
        raise _to_http_exception(exc) from exc

    return [
        RecommendationSchema.model_validate(r, from_attributes=True) for r in recommendations
    ]


@router.get(
    "/{assessment_id}/results",
    response_model=AssessmentResultsResponse,
    status_code=status.HTTP_200_OK,
    summary="Retrieve the full assessment result bundle",
)
async def get_results(
    assessment_id: int = Path(..., ge=1, le=MAX_RECORD_ID, description="Assessment id"),
    service: AssessmentService = Depends(get_assessment_service),
) -> AssessmentResultsResponse:
    """Return the assessment with its responses, recommendations and queries."""
    try:
        results = await service.get_results(assessment_id)
    except MaturityAssessmentError as exc:
        raise _to_http_exception(exc) from exc

    return AssessmentResultsResponse.model_validate(results, from_attributes=True)


@router.post(
    "/{assessment_id}/business-queries",
    response_model=BusinessQuerySchema,
    status_code=status.HTTP_201_CREATED,
    summary="Raise a business query against an assessment",
)
async def create_business_query(
    body: CreateBusinessQueryRequest,
    assessment_id: int = Path(..., ge=1, le=MAX_RECORD_ID, description="Assessment id"),
    service: AssessmentService = Depends(get_assessment_service),
) -> BusinessQuerySchema:
    """Record a free-text question aimed at a business function."""
    try:
        query = await service.create_business_query(
            assessment_id=assessment_id,
            query_text=body.query_text,
            target_function=body.target_function,
        )
    except MaturityAssessmentError as exc:
        raise _to_http_exception(exc) from exc

    return BusinessQuerySchema.model_validate(query, from_attributes=True)
