"""Abstract interfaces (Protocol classes) for the GCC Maturity Assessment service.

Services depend on these interfaces, not on concrete implementations, which
keeps the core free of SQLAlchemy and lets tests substitute AsyncMock
repositories. Concrete implementations live in
``adapters/repositories/assessment_repository.py``.
"""

from collections.abc import Sequence
from decimal import Decimal
from typing import Protocol, runtime_checkable

from gcc_maturity_assessment.core.enums import (
    Archetype,
    BusinessFunction,
    Dimension,
)
from gcc_maturity_assessment.core.models import (
    Assessment,
    AssessmentQuestion,
    AssessmentResponse,
    BusinessQuery,
    Recommendation,
    Resource,
)
from gcc_maturity_assessment.core.recommendations import RecommendationDraft
from gcc_maturity_assessment.core.scoring import ScoredResponse


@runtime_checkable
class IAssessmentRepository(Protocol):
    """Repository interface for Assessment persistence."""

    async def create(
        self,
        gcc_name: str,
        contact_email: str,
        annual_productivity_upliftment: Decimal,
        attrition_rate: Decimal,
        genai_use_cases_developed: int,
    ) -> Assessment:
        """Create a new, unscored assessment."""
        ...

    async def get_by_id(self, assessment_id: int) -> Assessment | None:
        """Retrieve an assessment by id."""
        ...

    async def update_scores(
        self,
        assessment: Assessment,
        overall_score: Decimal | None,
        dimension_scores: dict[Dimension, Decimal | None],
        archetype: Archetype,
    ) -> Assessment:
        """Write the overall score, all dimension scores and the archetype together."""
        ...


@runtime_checkable
class IQuestionRepository(Protocol):
    """Read-only repository interface for the questionnaire."""

    async def list_all(self) -> list[AssessmentQuestion]:
        """Return every question in canonical dimension order."""
        ...

    async def get_existing_ids(self, question_ids: Sequence[int]) -> set[int]:
        """Return the subset of question_ids that exist."""
        ...


@runtime_checkable
class IResponseRepository(Protocol):
    """Append-only repository interface for AssessmentResponse."""

    async def create_bulk(
        self,
        assessment_id: int,
        responses: Sequence[tuple[int, int]],
    ) -> list[AssessmentResponse]:
        """Insert (question_id, response_value) pairs for an assessment."""
        ...

    async def list_by_assessment(self, assessment_id: int) -> list[AssessmentResponse]:
        """Return all responses of an assessment."""
        ...

    async def get_answered_question_ids(
        self,
        assessment_id: int,
        question_ids: Sequence[int],
    ) -> set[int]:
        """Return the subset of question_ids already answered for an assessment."""
        ...

    async def list_scored_responses(self, assessment_id: int) -> list[ScoredResponse]:
        """Return all responses of an assessment tagged with question dimension."""
        ...


@runtime_checkable
class IRecommendationRepository(Protocol):
    """Append-only repository interface for Recommendation."""

    async def create_bulk(
        self,
        assessment_id: int,
        drafts: Sequence[RecommendationDraft],
    ) -> list[Recommendation]:
        """Persist drafts as new recommendation rows, preserving order."""
        ...

    async def list_by_assessment(self, assessment_id: int) -> list[Recommendation]:
        """Return all recommendations of an assessment."""
        ...


@runtime_checkable
class IBusinessQueryRepository(Protocol):
    """Repository interface for BusinessQuery."""

    async def create(
        self,
        assessment_id: int,
        query_text: str,
        target_function: BusinessFunction,
    ) -> BusinessQuery:
        """Persist a business query."""
        ...

    async def list_by_assessment(self, assessment_id: int) -> list[BusinessQuery]:
        """Return all business queries of an assessment."""
        ...


@runtime_checkable
class IResourceRepository(Protocol):
    """Read-only repository interface for the resource hub."""

    async def list_filtered(
        self,
        archetype: Archetype | None = None,
        dimension: Dimension | None = None,
    ) -> list[Resource]:
        """Return resources matching every given filter."""
        ...
