"""Service layer orchestrating the GCC maturity assessment workflow.

Implements the assessment lifecycle:
    1. create_assessment()          records organisation intake details
    2. list_questions()             returns the questionnaire
    3. submit_responses()           stores answers, scores and classifies
    4. generate_recommendations()   runs the rule table and stores drafts
    5. get_results()                returns the full result bundle

plus business queries and the resource hub lookup.

All database access goes through repository interfaces. No SQLAlchemy or
FastAPI imports belong here; the caller owns the transaction, so an exception
raised from any method leaves the database untouched.
"""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from gcc_maturity_assessment.core.enums import (
    DIMENSION_SCORE_FIELDS,
    Archetype,
    BusinessFunction,
    Dimension,
)
from gcc_maturity_assessment.core.errors import (
    AssessmentNotFoundError,
    DuplicateResponseError,
    QuestionNotFoundError,
)
from gcc_maturity_assessment.core.interfaces import (
    IAssessmentRepository,
    IBusinessQueryRepository,
    IQuestionRepository,
    IRecommendationRepository,
    IResourceRepository,
    IResponseRepository,
)
from gcc_maturity_assessment.core.models import (
    Assessment,
    AssessmentQuestion,
    AssessmentResponse,
    BusinessQuery,
    Recommendation,
    Resource,
)
from gcc_maturity_assessment.core.recommendations import generate_recommendations
from gcc_maturity_assessment.core.scoring import (
    classify_archetype,
    compute_scores,
    validate_response_value,
)
from gcc_maturity_assessment.observability import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResponseSubmission:
    """One answer in a submit_responses call.

    Attributes:
        question_id: Answered question.
        response_value: Answer on the 1-5 scale.
    """

    question_id: int
    response_value: int


@dataclass
class AssessmentResults:
    """Everything stored for one assessment."""

    assessment: Assessment
    responses: list[AssessmentResponse] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)
    business_queries: list[BusinessQuery] = field(default_factory=list)


class AssessmentService:
    """Orchestrates scoring, classification and recommendation generation.

    Depends on repository instances injected at construction time.
    Contains no framework-specific code.
    """

    def __init__(
        self,
        assessment_repository: IAssessmentRepository,
        question_repository: IQuestionRepository,
        response_repository: IResponseRepository,
        recommendation_repository: IRecommendationRepository,
        business_query_repository: IBusinessQueryRepository,
        resource_repository: IResourceRepository,
    ) -> None:
        """Initialise the service with repository dependencies.

        The parameters accept any object satisfying the Protocol interfaces
        defined in ``core/interfaces.py``.

        Args:
            assessment_repository: Assessment persistence.
            question_repository: Questionnaire reference data.
            response_repository: Append-only response persistence.
            recommendation_repository: Append-only recommendation persistence.
            business_query_repository: Business query persistence.
            resource_repository: Resource hub lookup.
        """
        self._assessment_repo = assessment_repository
        self._question_repo = question_repository
        self._response_repo = response_repository
        self._recommendation_repo = recommendation_repository
        self._business_query_repo = business_query_repository
        self._resource_repo = resource_repository

    async def create_assessment(
        self,
        gcc_name: str,
        contact_email: str,
        annual_productivity_upliftment: Decimal,
        attrition_rate: Decimal,
        genai_use_cases_developed: int,
    ) -> Assessment:
        """Record a new organisation intake with all scores unset.

        Args:
            gcc_name: Name of the Global Capability Center.
            contact_email: Contact address for the assessment.
            annual_productivity_upliftment: Productivity gain from GenAI, percent.
            attrition_rate: Annual attrition, percent.
            genai_use_cases_developed: Number of GenAI use cases built so far.

        Returns:
            The persisted Assessment.
        """
        assessment = await self._assessment_repo.create(
            gcc_name=gcc_name,
            contact_email=contact_email,
            annual_productivity_upliftment=annual_productivity_upliftment,
            attrition_rate=attrition_rate,
            genai_use_cases_developed=genai_use_cases_developed,
        )

        logger.info(
            "Assessment created",
            assessment_id=assessment.id,
            gcc_name=gcc_name,
        )
        return assessment

    async def list_questions(self) -> list[AssessmentQuestion]:
        """Return the questionnaire ordered by dimension, then question order."""
        return await self._question_repo.list_all()

    async def submit_responses(
        self,
        assessment_id: int,
        responses: Sequence[ResponseSubmission],
    ) -> Assessment:
        """Store answers, then rescore and reclassify the assessment.

        Every check runs before the first write. Scores are computed over the
        full stored response set of the assessment, including answers from
        earlier submissions, and each question may be answered only once per
        assessment.

        Args:
            assessment_id: Assessment being answered.
            responses: Answers to store.

        Returns:
            The assessment with updated scores and archetype.

        Raises:
            AssessmentNotFoundError: If the assessment does not exist.
            QuestionNotFoundError: If any question_id does not exist.
            DuplicateResponseError: If a question_id repeats within the
                submission or was answered by an earlier submission.
            InvalidResponseValueError: If any value is not an int in 1-5.
        """
        assessment = await self._assessment_repo.get_by_id(assessment_id)
        if assessment is None:
            raise AssessmentNotFoundError(assessment_id)

        question_ids = [response.question_id for response in responses]
        existing_ids = await self._question_repo.get_existing_ids(question_ids)
        missing_ids = sorted(set(question_ids) - existing_ids)
        if missing_ids:
            logger.warning(
                "Responses rejected for unknown questions",
                assessment_id=assessment_id,
                missing_question_ids=missing_ids,
            )
            raise QuestionNotFoundError(missing_ids)

        repeated_ids = sorted(
            question_id for question_id, count in Counter(question_ids).items() if count > 1
        )
        if repeated_ids:
            raise DuplicateResponseError(repeated_ids)

        answered_ids = await self._response_repo.get_answered_question_ids(
            assessment_id, question_ids
        )
        if answered_ids:
            logger.warning(
                "Responses rejected for answered questions",
                assessment_id=assessment_id,
                answered_question_ids=sorted(answered_ids),
            )
            raise DuplicateResponseError(sorted(answered_ids), assessment_id)

        for response in responses:
            validate_response_value(response.response_value, response.question_id)

        await self._response_repo.create_bulk(
            assessment_id,
            [(response.question_id, response.response_value) for response in responses],
        )

        scored_responses = await self._response_repo.list_scored_responses(assessment_id)
        scores = compute_scores(scored_responses)
        archetype = classify_archetype(scores.overall)

        assessment = await self._assessment_repo.update_scores(
            assessment,
            overall_score=scores.overall,
            dimension_scores=scores.per_dimension,
            archetype=archetype,
        )

        logger.info(
            "Assessment scored",
            assessment_id=assessment_id,
            submitted_count=len(responses),
            scored_count=scores.response_count,
            overall_score=str(scores.overall) if scores.overall is not None else None,
            archetype=archetype.value,
        )
        return assessment

    async def generate_recommendations(self, assessment_id: int) -> list[Recommendation]:
        """Run the recommendation rules for an assessment and store the output.

        Not idempotent: each call stores a fresh batch, so calling twice
        leaves two copies of every recommendation.

        Args:
            assessment_id: Assessment to generate recommendations for.

        Returns:
            The newly stored recommendations in rule order.

        Raises:
            AssessmentNotFoundError: If the assessment does not exist.
        """
        assessment = await self._assessment_repo.get_by_id(assessment_id)
        if assessment is None:
            raise AssessmentNotFoundError(assessment_id)

        dimension_scores = dimension_scores_of(assessment)
        archetype = assessment.archetype
        if archetype is None:
            archetype = classify_archetype(assessment.overall_maturity_score)

        drafts = generate_recommendations(Archetype(archetype), dimension_scores)
        recommendations = await self._recommendation_repo.create_bulk(assessment_id, drafts)

        logger.info(
            "Recommendations generated",
            assessment_id=assessment_id,
            archetype=Archetype(archetype).value,
            recommendation_count=len(recommendations),
            critical_count=sum(1 for draft in drafts if draft.is_critical_imperative),
        )
        return recommendations

    async def get_results(self, assessment_id: int) -> AssessmentResults:
        """Return the assessment with its responses, recommendations and queries.

        Raises:
            AssessmentNotFoundError: If the assessment does not exist.
        """
        assessment = await self._assessment_repo.get_by_id(assessment_id)
        if assessment is None:
            raise AssessmentNotFoundError(assessment_id)

        return AssessmentResults(
            assessment=assessment,
            responses=await self._response_repo.list_by_assessment(assessment_id),
            recommendations=await self._recommendation_repo.list_by_assessment(assessment_id),
            business_queries=await self._business_query_repo.list_by_assessment(assessment_id),
        )

    async def create_business_query(
        self,
        assessment_id: int,
        query_text: str,
        target_function: BusinessFunction,
    ) -> BusinessQuery:
        """Record a business question raised against an assessment.

        Raises:
            AssessmentNotFoundError: If the assessment does not exist.
        """
        assessment = await self._assessment_repo.get_by_id(assessment_id)
        if assessment is None:
            raise AssessmentNotFoundError(assessment_id)

        query = await self._business_query_repo.create(
            assessment_id=assessment_id,
            query_text=query_text,
            target_function=target_function,
        )

        logger.info(
            "Business query created",
            assessment_id=assessment_id,
            target_function=BusinessFunction(target_function).value,
        )
        return query

    async def list_resources(
        self,
        archetype: Archetype | None = None,
        dimension: Dimension | None = None,
    ) -> list[Resource]:
        """Return resource hub entries matching the optional filters."""
        return await self._resource_repo.list_filtered(archetype=archetype, dimension=dimension)


def dimension_scores_of(assessment: Assessment) -> dict[Dimension, Decimal | None]:
    """Read the seven stored dimension scores of an assessment."""
    return {
        dimension: getattr(assessment, field_name)
        for dimension, field_name in DIMENSION_SCORE_FIELDS.items()
    }
