"""Enumerated question metadata — values are the exact, case-sensitive names."""

from enum import StrEnum


class QuestionType(StrEnum):
    """Interaction mode: free-text entry or multiple choice."""

    TYPE = "Type"
    SELECT = "Select"


class QuestionCategory(StrEnum):
    GRAMMAR = "Grammar"
    PUNCTUATION = "Punctuation"


class QuestionDifficulty(StrEnum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
