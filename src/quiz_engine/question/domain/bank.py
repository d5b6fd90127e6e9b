"""QuestionBank aggregate — the immutable, validated collection of questions."""

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from quiz_engine.question.domain.answer import Answer
from quiz_engine.question.domain.errors import (
    REASON_ANSWER_COUNT,
    REASON_CORRECT_COUNT,
    REASON_INVALID_RECORD,
    QuestionValidationError,
)
from quiz_engine.question.domain.question import (
    ANSWERS_PER_QUESTION,
    CORRECT_ANSWERS_PER_QUESTION,
    Question,
)

QuestionRecord: TypeAlias = Question | Mapping[str, Any]

_ANSWER_LIST = TypeAdapter(list[Answer])


class QuestionBank(BaseModel, frozen=True):
    """Immutable, ordered collection of validated questions.

    Built once and shared read-only; selection never mutates it. Direct
    construction runs the same per-record checks as ``load``.
    """

    questions: tuple[Question, ...] = ()

    @field_validator("questions", mode="before")
    @classmethod
    def validate_records(cls, value: Any) -> Any:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            return value
        return tuple(
            _validate_record(index=index, record=record)
            for index, record in enumerate(value)
        )

    @classmethod
    def load(cls, records: Sequence[QuestionRecord]) -> "QuestionBank":
        """
        Validate records in index order and return a bank holding all of them.

        Validation is fail-fast: the first offending record aborts the load and
        no partial bank is returned.

        Raises:
            QuestionValidationError: with reason "answer count" if a record does
                not have exactly three answers, "correct count" if it does not
                have exactly one correct answer, or "invalid record" if it cannot
                be shaped into a Question at all.
        """
        return cls(questions=records)

    def count(self) -> int:
        return len(self.questions)

    def all(self) -> tuple[Question, ...]:
        """Read-only ordered view of every question in the bank."""
        return self.questions


def _validate_record(index: int, record: QuestionRecord) -> Question:
    if isinstance(record, Question):
        return record

    if not isinstance(record, Mapping):
        raise QuestionValidationError(
            index=index,
            reason=REASON_INVALID_RECORD,
            detail=f"expected a question mapping, got {type(record).__name__}",
        )

    raw_answers = record.get("answers")
    if not isinstance(raw_answers, (list, tuple)):
        raise QuestionValidationError(
            index=index,
            reason=REASON_INVALID_RECORD,
            detail=f"expected a list of answers, got {type(raw_answers).__name__}",
        )

    # Counted on the raw list so a malformed extra answer still reports the count.
    if len(raw_answers) != ANSWERS_PER_QUESTION:
        raise QuestionValidationError(
            index=index,
            reason=REASON_ANSWER_COUNT,
            detail=(
                f"a question must have exactly {ANSWERS_PER_QUESTION} answers,"
                f" got {len(raw_answers)}"
            ),
        )

    answers = _validate_answers(index=index, raw=raw_answers)

    correct = sum(1 for answer in answers if answer.is_correct)
    if correct != CORRECT_ANSWERS_PER_QUESTION:
        raise QuestionValidationError(
            index=index,
            reason=REASON_CORRECT_COUNT,
            detail=(
                f"a question must have exactly {CORRECT_ANSWERS_PER_QUESTION}"
                f" correct answer, got {correct}"
            ),
        )

    try:
        return Question.model_validate({**record, "answers": answers})
    except ValidationError as exc:
        raise QuestionValidationError(
            index=index, reason=REASON_INVALID_RECORD, detail=str(exc)
        ) from exc


def _validate_answers(index: int, raw: list[Any] | tuple[Any, ...]) -> list[Answer]:
    try:
        return _ANSWER_LIST.validate_python(list(raw))
    except ValidationError as exc:
        raise QuestionValidationError(
            index=index, reason=REASON_INVALID_RECORD, detail=str(exc)
        ) from exc
