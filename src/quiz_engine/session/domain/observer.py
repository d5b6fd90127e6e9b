"""Observer port for the quiz session — defines events in domain language."""

from typing import Protocol

from quiz_engine.session.domain.presented import PresentedQuestion


class SessionObserver(Protocol):
    """Notified whenever the session moves to a new active question.

    Implementations may render the question, log it, or record it for tests.
    """

    def question_changed(self, presented: PresentedQuestion) -> None: ...
