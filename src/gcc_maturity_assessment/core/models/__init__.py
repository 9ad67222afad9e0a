"""ORM models package for the GCC Maturity Assessment service."""

from gcc_maturity_assessment.core.models.assessment import (
    Assessment,
    AssessmentQuestion,
    AssessmentResponse,
    Base,
    BusinessQuery,
    Recommendation,
    Resource,
)

__all__ = [
    "Base",
    "Assessment",
    "AssessmentQuestion",
    "AssessmentResponse",
    "BusinessQuery",
    "Recommendation",
    "Resource",
]
