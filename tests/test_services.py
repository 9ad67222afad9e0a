"""Unit tests for AssessmentService business logic."""

from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from gcc_maturity_assessment.core.enums import (
    DIMENSION_SCORE_FIELDS,
    Archetype,
    BusinessFunction,
    Dimension,
    RecommendationCategory,
)
from gcc_maturity_assessment.core.errors import (
    AssessmentNotFoundError,
    DuplicateResponseError,
    ErrorCode,
    InvalidResponseValueError,
    QuestionNotFoundError,
)
from gcc_maturity_assessment.core.scoring import ScoredResponse
from gcc_maturity_assessment.core.services import (
    AssessmentResults,
    AssessmentService,
    ResponseSubmission,
)


def _make_assessment(
    assessment_id: int = 1,
    overall: str | None = None,
    archetype: Archetype | None = None,
    **dimension_scores: str,
) -> MagicMock:
    """Build an Assessment-like object with every score attribute set."""
    assessment = MagicMock()
    assessment.id = assessment_id
    assessment.overall_maturity_score = Decimal(overall) if overall is not None else None
    assessment.archetype = archetype
    for dimension, field_name in DIMENSION_SCORE_FIELDS.items():
        value = dimension_scores.get(dimension.value)
        setattr(assessment, field_name, Decimal(value) if value is not None else None)
    return assessment


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_assessment_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_id.return_value = _make_assessment()
    repo.update_scores.side_effect = lambda assessment, **kwargs: assessment
    return repo


@pytest.fixture()
def mock_question_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_existing_ids.side_effect = lambda ids: set(ids)
    return repo


@pytest.fixture()
def mock_response_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_answered_question_ids.return_value = set()
    return repo


@pytest.fixture()
def mock_recommendation_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.create_bulk.side_effect = lambda assessment_id, drafts: list(drafts)
    return repo


@pytest.fixture()
def mock_business_query_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture()
def mock_resource_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture()
def assessment_service(
    mock_assessment_repo: AsyncMock,
    mock_question_repo: AsyncMock,
    mock_response_repo: AsyncMock,
    mock_recommendation_repo: AsyncMock,
    mock_business_query_repo: AsyncMock,
    mock_resource_repo: AsyncMock,
) -> AssessmentService:
    return AssessmentService(
        assessment_repository=mock_assessment_repo,
        question_repository=mock_question_repo,
        response_repository=mock_response_repo,
        recommendation_repository=mock_recommendation_repo,
        business_query_repository=mock_business_query_repo,
        resource_repository=mock_resource_repo,
    )


# ---------------------------------------------------------------------------
# create_assessment / list_questions
# ---------------------------------------------------------------------------


class TestCreateAssessment:
    """Tests for AssessmentService.create_assessment."""

    @pytest.mark.asyncio()
    async def test_create_assessment_success(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
    ) -> None:
        """Delegates intake details to the repository unchanged."""
        created = _make_assessment(assessment_id=9)
        mock_assessment_repo.create.return_value = created

        result = await assessment_service.create_assessment(
            gcc_name="Acme GCC Bengaluru",
            contact_email="cto@acme.example",
            annual_productivity_upliftment=Decimal("12.50"),
            attrition_rate=Decimal("8.00"),
            genai_use_cases_developed=14,
        )

        assert result is created
        mock_assessment_repo.create.assert_awaited_once_with(
            gcc_name="Acme GCC Bengaluru",
            contact_email="cto@acme.example",
            annual_productivity_upliftment=Decimal("12.50"),
            attrition_rate=Decimal("8.00"),
            genai_use_cases_developed=14,
        )

    @pytest.mark.asyncio()
    async def test_list_questions(
        self,
        assessment_service: AssessmentService,
        mock_question_repo: AsyncMock,
    ) -> None:
        questions = [MagicMock(), MagicMock()]
        mock_question_repo.list_all.return_value = questions

        assert await assessment_service.list_questions() == questions


# ---------------------------------------------------------------------------
# submit_responses
# ---------------------------------------------------------------------------


class TestSubmitResponses:
    """Tests for AssessmentService.submit_responses."""

    @pytest.mark.asyncio()
    async def test_submit_scores_full_response_set(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
        mock_response_repo: AsyncMock,
    ) -> None:
        """Scores come from every stored response, then get written together."""
        mock_response_repo.list_scored_responses.return_value = [
            ScoredResponse(dimension=Dimension.STRATEGY, value=5, question_id=1),
            ScoredResponse(dimension=Dimension.STRATEGY, value=3, question_id=2),
            ScoredResponse(dimension=Dimension.TALENT, value=4, question_id=4),
            ScoredResponse(dimension=Dimension.TALENT, value=2, question_id=5),
        ]

        await assessment_service.submit_responses(
            1,
            [ResponseSubmission(question_id=4, response_value=4)],
        )

        mock_response_repo.create_bulk.assert_awaited_once_with(1, [(4, 4)])
        kwargs: dict[str, Any] = mock_assessment_repo.update_scores.await_args.kwargs
        assert kwargs["overall_score"] == Decimal("3.50")
        assert kwargs["archetype"] == Archetype.PROGRESSORS
        assert kwargs["dimension_scores"][Dimension.STRATEGY] == Decimal("4.00")
        assert kwargs["dimension_scores"][Dimension.TALENT] == Decimal("3.00")
        assert kwargs["dimension_scores"][Dimension.DATA] is None

    @pytest.mark.asyncio()
    async def test_submit_unknown_assessment_writes_nothing(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
        mock_response_repo: AsyncMock,
    ) -> None:
        mock_assessment_repo.get_by_id.return_value = None

        with pytest.raises(AssessmentNotFoundError) as exc_info:
            await assessment_service.submit_responses(
                42,
                [ResponseSubmission(question_id=1, response_value=3)],
            )

        assert exc_info.value.error_code == ErrorCode.NOT_FOUND
        assert "42" in exc_info.value.message
        mock_response_repo.create_bulk.assert_not_awaited()
        mock_assessment_repo.update_scores.assert_not_awaited()

    @pytest.mark.asyncio()
    async def test_submit_unknown_question_writes_nothing(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
        mock_question_repo: AsyncMock,
        mock_response_repo: AsyncMock,
    ) -> None:
        """One unknown question rejects the whole submission."""
        mock_question_repo.get_existing_ids.side_effect = None
        mock_question_repo.get_existing_ids.return_value = {1}

        with pytest.raises(QuestionNotFoundError) as exc_info:
            await assessment_service.submit_responses(
                1,
                [
                    ResponseSubmission(question_id=1, response_value=3),
                    ResponseSubmission(question_id=99, response_value=4),
                ],
            )

        assert exc_info.value.question_ids == [99]
        mock_response_repo.create_bulk.assert_not_awaited()
        mock_assessment_repo.update_scores.assert_not_awaited()

    @pytest.mark.asyncio()
    @pytest.mark.parametrize("bad_value", [0, 6, True])
    async def test_submit_invalid_value_writes_nothing(
        self,
        assessment_service: AssessmentService,
        mock_response_repo: AsyncMock,
        bad_value: Any,
    ) -> None:
        with pytest.raises(InvalidResponseValueError):
            await assessment_service.submit_responses(
                1,
                [
                    ResponseSubmission(question_id=1, response_value=3),
                    ResponseSubmission(question_id=2, response_value=bad_value),
                ],
            )

        mock_response_repo.create_bulk.assert_not_awaited()

    @pytest.mark.asyncio()
    async def test_submit_repeated_question_writes_nothing(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
        mock_response_repo: AsyncMock,
    ) -> None:
        """A question answered twice in one submission rejects all of it."""
        with pytest.raises(DuplicateResponseError) as exc_info:
            await assessment_service.submit_responses(
                1,
                [
                    ResponseSubmission(question_id=1, response_value=5),
                    ResponseSubmission(question_id=1, response_value=1),
                    ResponseSubmission(question_id=4, response_value=5),
                ],
            )

        assert exc_info.value.error_code == ErrorCode.DUPLICATE_RESPONSE
        assert exc_info.value.question_ids == [1]
        assert exc_info.value.assessment_id is None
        mock_response_repo.create_bulk.assert_not_awaited()
        mock_assessment_repo.update_scores.assert_not_awaited()

    @pytest.mark.asyncio()
    async def test_submit_already_answered_question_writes_nothing(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
        mock_response_repo: AsyncMock,
    ) -> None:
        """Answering a question stored by an earlier submission is rejected."""
        mock_response_repo.get_answered_question_ids.return_value = {1}

        with pytest.raises(DuplicateResponseError) as exc_info:
            await assessment_service.submit_responses(
                1,
                [
                    ResponseSubmission(question_id=1, response_value=5),
                    ResponseSubmission(question_id=4, response_value=3),
                ],
            )

        assert exc_info.value.question_ids == [1]
        assert exc_info.value.assessment_id == 1
        assert "already answered" in exc_info.value.message
        mock_response_repo.get_answered_question_ids.assert_awaited_once_with(1, [1, 4])
        mock_response_repo.create_bulk.assert_not_awaited()
        mock_assessment_repo.update_scores.assert_not_awaited()

    @pytest.mark.asyncio()
    async def test_submit_with_no_stored_responses_is_laggards(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
        mock_response_repo: AsyncMock,
    ) -> None:
        """An empty submission on a fresh assessment leaves scores null."""
        mock_response_repo.list_scored_responses.return_value = []

        await assessment_service.submit_responses(1, [])

        kwargs = mock_assessment_repo.update_scores.await_args.kwargs
        assert kwargs["overall_score"] is None
        assert kwargs["archetype"] == Archetype.LAGGARDS


# ---------------------------------------------------------------------------
# generate_recommendations
# ---------------------------------------------------------------------------


class TestGenerateRecommendations:
    """Tests for AssessmentService.generate_recommendations."""

    @pytest.mark.asyncio()
    async def test_uses_stored_archetype_and_scores(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
        mock_recommendation_repo: AsyncMock,
    ) -> None:
        all_high = {dimension.value: "4.50" for dimension in Dimension}
        mock_assessment_repo.get_by_id.return_value = _make_assessment(
            overall="4.50",
            archetype=Archetype.LEADERS,
            **all_high,
        )

        result = await assessment_service.generate_recommendations(1)

        assert [draft.category for draft in result] == [
            RecommendationCategory.IMPACT_MEASUREMENT_GOVERNANCE,
            RecommendationCategory.INNOVATION_VALUE_CREATION,
        ]
        mock_recommendation_repo.create_bulk.assert_awaited_once()

    @pytest.mark.asyncio()
    async def test_unscored_assessment_is_treated_as_laggards(
        self,
        assessment_service: AssessmentService,
    ) -> None:
        """With no archetype stored, the overall score is classified first."""
        result = await assessment_service.generate_recommendations(1)

        titles = [draft.title for draft in result]
        assert "GenAI Readiness Assessment" in titles
        assert "Advanced GenAI Research Initiatives" not in titles

    @pytest.mark.asyncio()
    async def test_repeated_calls_store_each_batch(
        self,
        assessment_service: AssessmentService,
        mock_recommendation_repo: AsyncMock,
    ) -> None:
        first = await assessment_service.generate_recommendations(1)
        second = await assessment_service.generate_recommendations(1)

        assert first == second
        assert mock_recommendation_repo.create_bulk.await_count == 2

    @pytest.mark.asyncio()
    async def test_unknown_assessment(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
        mock_recommendation_repo: AsyncMock,
    ) -> None:
        mock_assessment_repo.get_by_id.return_value = None

        with pytest.raises(AssessmentNotFoundError):
            await assessment_service.generate_recommendations(7)

        mock_recommendation_repo.create_bulk.assert_not_awaited()


# ---------------------------------------------------------------------------
# get_results / business queries / resources
# ---------------------------------------------------------------------------


class TestResultsAndQueries:
    """Tests for get_results, create_business_query and list_resources."""

    @pytest.mark.asyncio()
    async def test_get_results_bundle(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
        mock_response_repo: AsyncMock,
        mock_recommendation_repo: AsyncMock,
        mock_business_query_repo: AsyncMock,
    ) -> None:
        responses = [MagicMock()]
        recommendations = [MagicMock(), MagicMock()]
        queries: list[MagicMock] = []
        mock_response_repo.list_by_assessment.return_value = responses
        mock_recommendation_repo.list_by_assessment.return_value = recommendations
        mock_business_query_repo.list_by_assessment.return_value = queries

        result = await assessment_service.get_results(1)

        assert isinstance(result, AssessmentResults)
        assert result.assessment is mock_assessment_repo.get_by_id.return_value
        assert result.responses == responses
        assert result.recommendations == recommendations
        assert result.business_queries == []

    @pytest.mark.asyncio()
    async def test_get_results_unknown_assessment(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
    ) -> None:
        mock_assessment_repo.get_by_id.return_value = None

        with pytest.raises(AssessmentNotFoundError):
            await assessment_service.get_results(3)

    @pytest.mark.asyncio()
    async def test_create_business_query(
        self,
        assessment_service: AssessmentService,
        mock_business_query_repo: AsyncMock,
    ) -> None:
        await assessment_service.create_business_query(
            1,
            query_text="How should finance pilot invoice summarisation?",
            target_function=BusinessFunction.FINANCE,
        )

        mock_business_query_repo.create.assert_awaited_once_with(
            assessment_id=1,
            query_text="How should finance pilot invoice summarisation?",
            target_function=BusinessFunction.FINANCE,
        )

    @pytest.mark.asyncio()
    async def test_create_business_query_unknown_assessment(
        self,
        assessment_service: AssessmentService,
        mock_assessment_repo: AsyncMock,
        mock_business_query_repo: AsyncMock,
    ) -> None:
        mock_assessment_repo.get_by_id.return_value = None

        with pytest.raises(AssessmentNotFoundError):
            await assessment_service.create_business_query(
                5,
                query_text="Anything",
                target_function=BusinessFunction.HR,
            )

        mock_business_query_repo.create.assert_not_awaited()

    @pytest.mark.asyncio()
    async def test_list_resources_passes_filters(
        self,
        assessment_service: AssessmentService,
        mock_resource_repo: AsyncMock,
    ) -> None:
        await assessment_service.list_resources(
            archetype=Archetype.LEADERS,
            dimension=Dimension.DATA,
        )

        mock_resource_repo.list_filtered.assert_awaited_once_with(
            archetype=Archetype.LEADERS,
            dimension=Dimension.DATA,
        )
