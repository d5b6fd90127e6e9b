"""Tests verifying the QuizEngineError type hierarchy."""

from pathlib import Path

from quiz_engine.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from quiz_engine.core.errors import QuizEngineError
from quiz_engine.question.domain.errors import QuestionValidationError
from quiz_engine.question.infrastructure.errors import QuestionSourceError
from quiz_engine.selection.domain.errors import EmptyBankError, RandomSourceError


class TestQuizEngineErrorHierarchy:
    """All quiz-engine-specific exceptions inherit from QuizEngineError."""

    def test_question_validation_error_is_quiz_engine_error(self) -> None:
        error = QuestionValidationError(index=0, reason="answer count", detail="x")
        assert isinstance(error, QuizEngineError)

    def test_question_source_error_is_quiz_engine_error(self) -> None:
        assert isinstance(QuestionSourceError(reason="x"), QuizEngineError)

    def test_empty_bank_error_is_quiz_engine_error(self) -> None:
        assert isinstance(EmptyBankError(), QuizEngineError)

    def test_random_source_error_is_quiz_engine_error(self) -> None:
        assert isinstance(RandomSourceError(drawn=3, stop=3), QuizEngineError)

    def test_config_errors_are_quiz_engine_errors(self) -> None:
        assert isinstance(ConfigLoadError(path=Path("/x.yaml")), QuizEngineError)
        assert isinstance(ConfigValidationError(reason="bad"), QuizEngineError)
        assert isinstance(MissingEnvVarsError(missing_vars=["A"]), QuizEngineError)

    def test_quiz_engine_error_is_exception(self) -> None:
        assert isinstance(QuizEngineError("test"), Exception)

    def test_default_is_not_retriable(self) -> None:
        assert QuizEngineError("test").retriable is False
