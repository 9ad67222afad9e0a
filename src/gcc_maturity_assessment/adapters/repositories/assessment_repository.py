"""Repositories for the GCC maturity assessment data layer.

Implements the Protocol interfaces from ``core/interfaces.py`` using the
SQLAlchemy 2.0 async ORM. Repositories only flush; the transaction opened by
``database.get_db_session`` decides whether work is committed or rolled back.
SQLAlchemy errors are not caught here.
"""

from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from gcc_maturity_assessment.core.enums import (
    DIMENSION_ORDER,
    DIMENSION_SCORE_FIELDS,
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
from gcc_maturity_assessment.observability import get_logger

logger = get_logger(__name__)


class AssessmentRepository:
    """Repository for Assessment persistence."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialise with an async database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(
        self,
        gcc_name: str,
        contact_email: str,
        annual_productivity_upliftment: Decimal,
        attrition_rate: Decimal,
        genai_use_cases_developed: int,
    ) -> Assessment:
        """Persist a new assessment with all scores unset.

        Returns:
            The persisted Assessment with its generated id.
        """
        record = Assessment(
            gcc_name=gcc_name,
            contact_email=contact_email,
            annual_productivity_upliftment=annual_productivity_upliftment,
            attrition_rate=attrition_rate,
            genai_use_cases_developed=genai_use_cases_developed,
        )
        self._session.add(record)
        await self._session.flush()
        await self._session.refresh(record)

        logger.debug("Assessment persisted", assessment_id=record.id, gcc_name=gcc_name)
        return record

    async def get_by_id(self, assessment_id: int) -> Assessment | None:
        """Retrieve an assessment by id.

        Returns:
            The Assessment, or None when it does not exist.
        """
        result = await self._session.execute(
            select(Assessment).where(Assessment.id == assessment_id)
        )
        return result.scalar_one_or_none()

    async def update_scores(
        self,
        assessment: Assessment,
        overall_score: Decimal | None,
        dimension_scores: dict[Dimension, Decimal | None],
        archetype: Archetype,
    ) -> Assessment:
        """Write the overall score, every dimension score and the archetype.

        All nine columns are written in a single UPDATE. Dimensions missing
        from ``dimension_scores`` are cleared to NULL.

        Returns:
            The refreshed Assessment.
        """
        assessment.overall_maturity_score = overall_score
        for dimension, field_name in DIMENSION_SCORE_FIELDS.items():
            setattr(assessment, field_name, dimension_scores.get(dimension))
        assessment.archetype = archetype
        assessment.updated_at = datetime.now(tz=timezone.utc)

        await self._session.flush()
        await self._session.refresh(assessment)

        logger.debug(
            "Assessment scores persisted",
            assessment_id=assessment.id,
            archetype=archetype.value,
        )
        return assessment


class QuestionRepository:
    """Read-only repository for the assessment questionnaire."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialise with an async database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def list_all(self) -> list[AssessmentQuestion]:
        """Return every question ordered by dimension, then question_order.

        Dimension order is the enum declaration order, not alphabetical, so
        the sort happens in Python rather than in SQL.
        """
        result = await self._session.execute(select(AssessmentQuestion))
        return sorted(
            result.scalars().all(),
            key=lambda question: (
                DIMENSION_ORDER[question.dimension],
                question.question_order,
                question.id,
            ),
        )

    async def get_existing_ids(self, question_ids: Sequence[int]) -> set[int]:
        """Return the subset of question_ids present in the questionnaire."""
        if not question_ids:
            return set()
        result = await self._session.execute(
            select(AssessmentQuestion.id).where(AssessmentQuestion.id.in_(set(question_ids)))
        )
        return set(result.scalars().all())

    async def count(self) -> int:
        """Return the number of questions stored."""
        result = await self._session.execute(select(func.count(AssessmentQuestion.id)))
        return int(result.scalar_one())

    async def create_bulk(
        self,
        questions: Sequence[tuple[Dimension, int, str]],
    ) -> list[AssessmentQuestion]:
        """Insert (dimension, question_order, question_text) reference rows."""
        records = [
            AssessmentQuestion(
                dimension=dimension,
                question_order=question_order,
                question_text=question_text,
            )
            for dimension, question_order, question_text in questions
        ]
        self._session.add_all(records)
        await self._session.flush()
        return records


class ResponseRepository:
    """Append-only repository for AssessmentResponse rows."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialise with an async database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create_bulk(
        self,
        assessment_id: int,
        responses: Sequence[tuple[int, int]],
    ) -> list[AssessmentResponse]:
        """Insert responses for an assessment.

        Args:
            assessment_id: Owning assessment.
            responses: (question_id, response_value) pairs.

        Returns:
            The persisted AssessmentResponse rows, in input order.
        """
        records = [
            AssessmentResponse(
                assessment_id=assessment_id,
                question_id=question_id,
                response_value=response_value,
            )
            for question_id, response_value in responses
        ]
        self._session.add_all(records)
        await self._session.flush()

        logger.debug(
            "Responses persisted",
            assessment_id=assessment_id,
            response_count=len(records),
        )
        return records

    async def list_by_assessment(self, assessment_id: int) -> list[AssessmentResponse]:
        """Return all responses of an assessment in insertion order."""
        result = await self._session.execute(
            select(AssessmentResponse)
            .where(AssessmentResponse.assessment_id == assessment_id)
            .order_by(AssessmentResponse.id)
        )
        return list(result.scalars().all())

    async def get_answered_question_ids(
        self,
        assessment_id: int,
        question_ids: Sequence[int],
    ) -> set[int]:
        """Return the subset of question_ids already answered for an assessment."""
        if not question_ids:
            return set()
        result = await self._session.execute(
            select(AssessmentResponse.question_id).where(
                AssessmentResponse.assessment_id == assessment_id,
                AssessmentResponse.question_id.in_(set(question_ids)),
            )
        )
        return set(result.scalars().all())

    async def list_scored_responses(self, assessment_id: int) -> list[ScoredResponse]:
        """Return every response of an assessment tagged with its dimension.

        Joins each response to its question so that the scoring engine sees
        the full stored response set, not only the latest submission.
        """
        result = await self._session.execute(
            select(
                AssessmentQuestion.dimension,
                AssessmentResponse.response_value,
                AssessmentResponse.question_id,
            )
            .join(AssessmentQuestion, AssessmentQuestion.id == AssessmentResponse.question_id)
            .where(AssessmentResponse.assessment_id == assessment_id)
            .order_by(AssessmentResponse.id)
        )
        return [
            ScoredResponse(dimension=dimension, value=value, question_id=question_id)
            for dimension, value, question_id in result.all()
        ]


class RecommendationRepository:
    """Append-only repository for Recommendation rows."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialise with an async database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create_bulk(
        self,
        assessment_id: int,
        drafts: Sequence[RecommendationDraft],
    ) -> list[Recommendation]:
        """Persist each draft as a new row.

        No deduplication is performed: calling this twice with the same
        drafts stores two copies.

        Returns:
            The persisted rows, in draft order.
        """
        records = [
            Recommendation(
                assessment_id=assessment_id,
                category=draft.category,
                title=draft.title,
                description=draft.description,
                priority_level=draft.priority_level,
                is_critical_imperative=draft.is_critical_imperative,
                expected_impact=draft.expected_impact,
                implementation_timeline=draft.implementation_timeline,
            )
            for draft in drafts
        ]
        self._session.add_all(records)
        await self._session.flush()

        logger.debug(
            "Recommendations persisted",
            assessment_id=assessment_id,
            recommendation_count=len(records),
        )
        return records

    async def list_by_assessment(self, assessment_id: int) -> list[Recommendation]:
        """Return all recommendations of an assessment in insertion order."""
        result = await self._session.execute(
            select(Recommendation)
            .where(Recommendation.assessment_id == assessment_id)
            .order_by(Recommendation.id)
        )
        return list(result.scalars().all())


class BusinessQueryRepository:
    """Repository for BusinessQuery rows."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialise with an async database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def create(
        self,
        assessment_id: int,
        query_text: str,
        target_function: BusinessFunction,
    ) -> BusinessQuery:
        """Persist a business query for an assessment."""
        record = BusinessQuery(
            assessment_id=assessment_id,
            query_text=query_text,
            target_function=target_function,
        )
        self._session.add(record)
        await self._session.flush()
        await self._session.refresh(record)
        return record

    async def list_by_assessment(self, assessment_id: int) -> list[BusinessQuery]:
        """Return all business queries of an assessment in insertion order."""
        result = await self._session.execute(
            select(BusinessQuery)
            .where(BusinessQuery.assessment_id == assessment_id)
            .order_by(BusinessQuery.id)
        )
        return list(result.scalars().all())


class ResourceRepository:
    """Repository for resource hub content."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialise with an async database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def list_filtered(
        self,
        archetype: Archetype | None = None,
        dimension: Dimension | None = None,
    ) -> list[Resource]:
        """Return resources matching every filter that is given.

        Args:
            archetype: Only resources targeted at this archetype.
            dimension: Only resources targeted at this dimension.

        Returns:
            Matching resources ordered by id; all resources with no filter.
        """
        query = select(Resource)
        if archetype is not None:
            query = query.where(Resource.target_archetype == archetype)
        if dimension is not None:
            query = query.where(Resource.target_dimension == dimension)

        result = await self._session.execute(query.order_by(Resource.id))
        return list(result.scalars().all())

    async def count(self) -> int:
        """Return the number of resources stored."""
        result = await self._session.execute(select(func.count(Resource.id)))
        return int(result.scalar_one())

    async def create_bulk(self, resources: Sequence[dict[str, object]]) -> list[Resource]:
        """Insert resource rows from column-value dicts."""
        records = [Resource(**data) for data in resources]
        self._session.add_all(records)
        await self._session.flush()
        return records
