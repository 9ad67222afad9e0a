"""Services package for the GCC Maturity Assessment service."""

from gcc_maturity_assessment.core.services.assessment_service import (
    AssessmentResults,
    AssessmentService,
    ResponseSubmission,
)

__all__ = [
    "AssessmentResults",
    "AssessmentService",
    "ResponseSubmission",
]
