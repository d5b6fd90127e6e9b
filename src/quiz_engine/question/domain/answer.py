"""Answer domain value object — one candidate response to a question."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Answer(BaseModel, frozen=True):
    """Immutable value object representing a candidate answer and its correctness.

    Accepts both the document field names (``answerText``, ``isCorrect``) and
    the short names (``text``, ``is_correct``). ``is_correct`` is strict: only
    a real boolean is accepted.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        min_length=1,
        validation_alias=AliasChoices("text", "answerText"),
    )
    is_correct: bool = Field(
        strict=True,
        validation_alias=AliasChoices("is_correct", "isCorrect"),
    )
