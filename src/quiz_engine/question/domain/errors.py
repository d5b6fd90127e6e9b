"""Error types raised while validating a question bank."""

from quiz_engine.core.errors import QuizEngineError

REASON_ANSWER_COUNT = "answer count"
REASON_CORRECT_COUNT = "correct count"
REASON_INVALID_RECORD = "invalid record"


class QuestionValidationError(QuizEngineError):
    """Raised when the question at ``index`` violates the bank invariants.

    ``reason`` is one of ``REASON_ANSWER_COUNT``, ``REASON_CORRECT_COUNT`` or
    ``REASON_INVALID_RECORD``; ``detail`` carries the human-readable specifics.
    """

    def __init__(self, index: int, reason: str, detail: str) -> None:
        self.index = index
        self.reason = reason
        self.detail = detail
        super().__init__(f"Failed to validate question at index {index}: {detail}")
