"""StructlogSessionObserver — production observer that delegates to structlog."""

import structlog

from quiz_engine.session.domain.presented import PresentedQuestion


class StructlogSessionObserver:
    """Logs session events to structlog.

    Does NOT inherit from SessionObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def question_changed(self, presented: PresentedQuestion) -> None:
        question = presented.question
        self._log.info(
            "session.question_changed",
            question=question.text,
            type=str(question.type),
            category=str(question.category),
            difficulty=str(question.difficulty),
            answers=[answer.text for answer in presented.answers],
        )
