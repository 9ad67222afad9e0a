"""Pydantic schemas package for the GCC Maturity Assessment API."""

from gcc_maturity_assessment.api.schemas.assessment import (
    MAX_RECORD_ID,
    AssessmentResultsResponse,
    AssessmentSchema,
    BusinessQuerySchema,
    CreateAssessmentRequest,
    CreateBusinessQueryRequest,
    ErrorResponse,
    HealthResponse,
    QuestionSchema,
    RecommendationSchema,
    ResourceSchema,
    ResponseItem,
    ResponseSchema,
    SubmitResponsesRequest,
)

__all__ = [
    "MAX_RECORD_ID",
    "AssessmentResultsResponse",
    "AssessmentSchema",
    "BusinessQuerySchema",
    "CreateAssessmentRequest",
    "CreateBusinessQueryRequest",
    "ErrorResponse",
    "HealthResponse",
    "QuestionSchema",
    "RecommendationSchema",
    "ResourceSchema",
    "ResponseItem",
    "ResponseSchema",
    "SubmitResponsesRequest",
]
