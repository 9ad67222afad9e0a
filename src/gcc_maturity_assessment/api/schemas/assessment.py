"""Pydantic request/response schemas for the GCC Maturity Assessment API.

All API inputs and outputs are strictly typed Pydantic v2 models built from
ORM rows with ``model_validate(..., from_attributes=True)``. Scores are held
as two-place ``Decimal`` values and serialised to JSON numbers.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field, PlainSerializer

from gcc_maturity_assessment.core.enums import (
    Archetype,
    BusinessFunction,
    ContentType,
    Dimension,
    RecommendationCategory,
)

# Largest id accepted from callers; matches a 32-bit signed INTEGER column
MAX_RECORD_ID = 2**31 - 1

# Two-place decimal rendered as a JSON number
Score = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Assessment
# ---------------------------------------------------------------------------


class CreateAssessmentRequest(BaseModel):
    """Request body for registering a GCC for assessment.

    Attributes:
        gcc_name: Name of the Global Capability Center.
        contact_email: Contact address for the assessment.
        annual_productivity_upliftment: Productivity gain from GenAI, percent.
        attrition_rate: Annual attrition, percent.
        genai_use_cases_developed: GenAI use cases developed so far.
    """

    gcc_name: str = Field(..., min_length=1, max_length=255)
    contact_email: EmailStr
    annual_productivity_upliftment: Decimal = Field(
        ..., ge=0, max_digits=10, decimal_places=2
    )
    attrition_rate: Decimal = Field(..., ge=0, max_digits=5, decimal_places=2)
    genai_use_cases_developed: int = Field(..., ge=0, le=MAX_RECORD_ID)


class AssessmentSchema(_ORMModel):
    """An assessment with its scores and archetype.

    Score fields and archetype are null until responses are submitted.
    """

    id: int
    gcc_name: str
    contact_email: str
    annual_productivity_upliftment: Score
    attrition_rate: Score
    genai_use_cases_developed: int
    overall_maturity_score: Score | None
    strategy_score: Score | None
    talent_score: Score | None
    operating_model_score: Score | None
    technology_score: Score | None
    data_score: Score | None
    adoption_scaling_score: Score | None
    ai_trust_score: Score | None
    archetype: Archetype | None
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Questions and responses
# ---------------------------------------------------------------------------


class QuestionSchema(_ORMModel):
    """A questionnaire item."""

    id: int
    dimension: Dimension
    question_text: str
    question_order: int
    created_at: datetime


class ResponseItem(BaseModel):
    """A single answer within a submission.

    Attributes:
        question_id: Identifier of the answered question.
        response_value: Integer answer on the 1-5 scale.
    """

    question_id: int = Field(..., ge=1, le=MAX_RECORD_ID)
    response_value: int = Field(
        ...,
        ge=1,
        le=5,
        strict=True,
        description="Answer on a 1-5 scale: 1=Not started, 5=Fully embedded",
    )


class SubmitResponsesRequest(BaseModel):
    """Request body for submitting answers to an assessment."""

    responses: list[ResponseItem]


class ResponseSchema(_ORMModel):
    """A stored answer."""

    id: int
    assessment_id: int
    question_id: int
    response_value: int
    created_at: datetime


# ---------------------------------------------------------------------------
# Recommendations, business queries, resources
# ---------------------------------------------------------------------------


class RecommendationSchema(_ORMModel):
    """A stored recommendation."""

    id: int
    assessment_id: int
    category: RecommendationCategory
    title: str
    description: str
    priority_level: int
    is_critical_imperative: bool
    expected_impact: str | None
    implementation_timeline: str | None
    created_at: datetime


class CreateBusinessQueryRequest(BaseModel):
    """Request body for raising a business question against an assessment."""

    query_text: str = Field(..., min_length=1)
    target_function: BusinessFunction


class BusinessQuerySchema(_ORMModel):
    """A stored business query."""

    id: int
    assessment_id: int
    query_text: str
    target_function: BusinessFunction
    created_at: datetime


class ResourceSchema(_ORMModel):
    """A resource hub entry."""

    id: int
    title: str
    description: str
    content_type: ContentType
    target_archetype: Archetype | None
    target_dimension: Dimension | None
    content_url: str | None
    created_at: datetime


class AssessmentResultsResponse(_ORMModel):
    """Full result bundle for an assessment.

    Attributes:
        assessment: The assessment with its scores.
        responses: Every stored answer.
        recommendations: Every generated recommendation, oldest first.
        business_queries: Every business query raised.
    """

    assessment: AssessmentSchema
    responses: list[ResponseSchema]
    recommendations: list[RecommendationSchema]
    business_queries: list[BusinessQuerySchema]


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    status: str
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Error payload carried under ``detail`` for every mapped service error."""

    error_code: str
    detail: str
