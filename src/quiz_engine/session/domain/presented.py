"""PresentedQuestion — a question paired with the answer order shown to the user."""

from pydantic import BaseModel, ConfigDict

from quiz_engine.question.domain.answer import Answer
from quiz_engine.question.domain.question import Question


class PresentedQuestion(BaseModel, frozen=True):
    """Immutable DTO handed to the presentation layer.

    ``answers`` is a shuffled permutation of ``question.answers``.
    """

    model_config = ConfigDict(frozen=True)

    question: Question
    answers: tuple[Answer, ...]
