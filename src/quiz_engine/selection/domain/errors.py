"""Error types raised by question and answer selection."""

from quiz_engine.core.errors import QuizEngineError


class EmptyBankError(QuizEngineError):
    """Raised when a question is requested from a bank with no questions."""

    def __init__(self) -> None:
        super().__init__("Failed to pick question: the question bank is empty")


class RandomSourceError(QuizEngineError):
    """Raised when a random source returns an index outside ``[0, stop)``."""

    def __init__(self, drawn: int, stop: int) -> None:
        self.drawn = drawn
        self.stop = stop
        super().__init__(
            f"Failed to draw random index: got {drawn}, expected 0 <= index < {stop}"
        )
