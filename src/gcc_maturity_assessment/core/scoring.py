"""Maturity scoring and archetype classification.

Responses are integers on a 1-5 scale. A dimension score is the arithmetic
mean of the responses tagged with that dimension; the overall score is the
mean of *all* responses (not the mean of the dimension means). Every score is
a ``Decimal`` rounded half-up to two decimal places so that stored values
match the ``Numeric(5, 2)`` columns exactly.

This module is independent of the database layer so that the scoring logic
can be unit-tested without any infrastructure.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from gcc_maturity_assessment.core.enums import ALL_DIMENSIONS, Archetype, Dimension
from gcc_maturity_assessment.core.errors import InvalidResponseValueError
from gcc_maturity_assessment.observability import get_logger

logger = get_logger(__name__)

MIN_RESPONSE_VALUE: int = 1
MAX_RESPONSE_VALUE: int = 5

_TWO_PLACES = Decimal("0.01")

# Archetype boundary thresholds (inclusive lower bound), highest first.
# Anything below the last threshold, or a missing score, is a laggard.
_ARCHETYPE_THRESHOLDS: list[tuple[Decimal, Archetype]] = [
    (Decimal("4.0"), Archetype.LEADERS),
    (Decimal("3.0"), Archetype.PROGRESSORS),
    (Decimal("2.0"), Archetype.EMERGENTS),
]


@dataclass(frozen=True)
class ScoredResponse:
    """A single response value tagged with the dimension of its question.

    Attributes:
        dimension: Dimension of the answered question.
        value: Response on the 1-5 scale.
        question_id: Answered question, used only in error messages.
    """

    dimension: Dimension
    value: int
    question_id: int | None = None


@dataclass(frozen=True)
class ScoreResult:
    """Output of ``compute_scores``.

    Attributes:
        overall: Mean of all response values, or None with no responses.
        per_dimension: Mean per dimension; None for unanswered dimensions.
        response_count: Number of responses that were scored.
    """

    overall: Decimal | None
    per_dimension: dict[Dimension, Decimal | None] = field(default_factory=dict)
    response_count: int = 0


def validate_response_value(value: object, question_id: int | None = None) -> int:
    """Ensure a response value is an integer between 1 and 5.

    Args:
        value: The candidate response value.
        question_id: Question the value answers, for the error message.

    Returns:
        The validated value.

    Raises:
        InvalidResponseValueError: If value is not an int in range. Booleans
            are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidResponseValueError(value, question_id)
    if not (MIN_RESPONSE_VALUE <= value <= MAX_RESPONSE_VALUE):
        raise InvalidResponseValueError(value, question_id)
    return value


def round_score(value: Decimal) -> Decimal:
    """Round a score half-up to two decimal places."""
    return value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def mean_score(values: list[int]) -> Decimal | None:
    """Arithmetic mean of response values rounded to two places.

    Returns:
        The rounded mean, or None for an empty list.
    """
    if not values:
        return None
    return round_score(Decimal(sum(values)) / Decimal(len(values)))


def compute_scores(responses: Iterable[ScoredResponse]) -> ScoreResult:
    """Compute per-dimension and overall scores for a response set.

    The result does not depend on the order of ``responses``.

    Args:
        responses: Every response of one assessment.

    Returns:
        ScoreResult with the overall score and one entry per dimension.

    Raises:
        InvalidResponseValueError: If any value is outside 1-5 or not an int.
    """
    values_by_dimension: dict[Dimension, list[int]] = {
        dimension: [] for dimension in ALL_DIMENSIONS
    }
    all_values: list[int] = []

    for response in responses:
        value = validate_response_value(response.value, response.question_id)
        values_by_dimension[Dimension(response.dimension)].append(value)
        all_values.append(value)

    per_dimension = {
        dimension: mean_score(values)
        for dimension, values in values_by_dimension.items()
    }
    overall = mean_score(all_values)

    logger.debug(
        "Scores computed",
        response_count=len(all_values),
        overall_score=str(overall) if overall is not None else None,
        unanswered_dimensions=[
            dimension.value for dimension, score in per_dimension.items() if score is None
        ],
    )

    return ScoreResult(
        overall=overall,
        per_dimension=per_dimension,
        response_count=len(all_values),
    )


def classify_archetype(overall_score: Decimal | float | None) -> Archetype:
    """Map an overall score to a maturity archetype.

    Thresholds (inclusive lower bound):
        >= 4.0 -> leaders
        >= 3.0 -> progressors
        >= 2.0 -> emergents
        otherwise, or None -> laggards

    A None score (nothing answered yet) is deliberately classified as
    laggards rather than left unset.

    Args:
        overall_score: Overall maturity score on the 1-5 scale, or None.

    Returns:
        The archetype. Never raises.
    """
    if overall_score is None:
        return Archetype.LAGGARDS

    score = Decimal(str(overall_score))
    if score.is_nan():
        return Archetype.LAGGARDS
    for threshold, archetype in _ARCHETYPE_THRESHOLDS:
        if score >= threshold:
            return archetype
    return Archetype.LAGGARDS
