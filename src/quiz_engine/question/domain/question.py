"""Question domain value object — a prompt with exactly three candidate answers."""

from typing import Self

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from quiz_engine.question.domain.answer import Answer
from quiz_engine.question.domain.enums import (
    QuestionCategory,
    QuestionDifficulty,
    QuestionType,
)

ANSWERS_PER_QUESTION = 3
CORRECT_ANSWERS_PER_QUESTION = 1


class Question(BaseModel, frozen=True):
    """Immutable value object representing one quiz question.

    ``answers`` is a fixed-length 3-tuple and exactly one answer must be
    correct, so a constructed Question always satisfies the bank invariant.
    ``type`` is descriptive metadata only.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        min_length=1,
        validation_alias=AliasChoices("text", "questionText"),
    )
    type: QuestionType
    category: QuestionCategory
    difficulty: QuestionDifficulty
    answers: tuple[Answer, Answer, Answer]

    @model_validator(mode="after")
    def exactly_one_correct_answer(self) -> Self:
        correct = sum(1 for answer in self.answers if answer.is_correct)
        if correct != CORRECT_ANSWERS_PER_QUESTION:
            raise ValueError(
                f"a question must have exactly {CORRECT_ANSWERS_PER_QUESTION}"
                f" correct answer, got {correct}"
            )
        return self
