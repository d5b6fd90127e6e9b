"""Base exception class for all quiz-engine-specific errors."""


class QuizEngineError(Exception):
    """Base class for all quiz-engine errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
