"""SQLAlchemy repositories for the GCC Maturity Assessment service."""

from gcc_maturity_assessment.adapters.repositories.assessment_repository import (
    AssessmentRepository,
    BusinessQueryRepository,
    QuestionRepository,
    RecommendationRepository,
    ResourceRepository,
    ResponseRepository,
)

__all__ = [
    "AssessmentRepository",
    "BusinessQueryRepository",
    "QuestionRepository",
    "RecommendationRepository",
    "ResourceRepository",
    "ResponseRepository",
]
