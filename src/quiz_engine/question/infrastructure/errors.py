"""Error types raised by question source infrastructure."""

from quiz_engine.core.errors import QuizEngineError


class QuestionSourceError(QuizEngineError):
    """Raised when a question document cannot be read or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load questions: {reason}")
