"""Error taxonomy for the GCC Maturity Assessment service.

Core code raises these exceptions; the API layer maps them to HTTP status
codes in ``api/routes/assessment.py``. Storage failures are not wrapped:
SQLAlchemy errors propagate unchanged from the repositories and are
reported as ``ErrorCode.STORAGE_FAILURE`` by the handler in ``main.py``.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in API error bodies."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_RESPONSE_VALUE = "INVALID_RESPONSE_VALUE"
    DUPLICATE_RESPONSE = "DUPLICATE_RESPONSE"
    STORAGE_FAILURE = "STORAGE_FAILURE"


class MaturityAssessmentError(Exception):
    """Base class for all service errors.

    Attributes:
        message: Human-readable description.
        error_code: Machine-readable code for API consumers.
    """

    error_code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(MaturityAssessmentError):
    """Raised when a referenced record does not exist."""

    error_code = ErrorCode.NOT_FOUND


class AssessmentNotFoundError(NotFoundError):
    """Raised when no assessment exists for the requested id."""

    def __init__(self, assessment_id: int) -> None:
        super().__init__(f"Assessment with id {assessment_id} not found")
        self.assessment_id = assessment_id


class QuestionNotFoundError(NotFoundError):
    """Raised when a submitted response references unknown question ids."""

    def __init__(self, question_ids: list[int]) -> None:
        ids = ", ".join(str(question_id) for question_id in question_ids)
        super().__init__(f"Question with id {ids} not found")
        self.question_ids = question_ids


class InvalidResponseValueError(MaturityAssessmentError):
    """Raised when a response value is not an integer between 1 and 5."""

    error_code = ErrorCode.INVALID_RESPONSE_VALUE

    def __init__(self, value: object, question_id: int | None = None) -> None:
        where = f" for question {question_id}" if question_id is not None else ""
        super().__init__(
            f"Response value must be an integer between 1 and 5, got {value!r}{where}"
        )
        self.value = value
        self.question_id = question_id


class DuplicateResponseError(MaturityAssessmentError):
    """Raised when a submission would answer a question twice.

    Covers a question_id repeated within one submission (``assessment_id`` is
    None) and a question already answered for the assessment.
    """

    error_code = ErrorCode.DUPLICATE_RESPONSE

    def __init__(self, question_ids: list[int], assessment_id: int | None = None) -> None:
        ids = ", ".join(str(question_id) for question_id in question_ids)
        if assessment_id is None:
            message = f"Question with id {ids} answered more than once in this submission"
        else:
            message = f"Question with id {ids} already answered for assessment {assessment_id}"
        super().__init__(message)
        self.question_ids = question_ids
        self.assessment_id = assessment_id
