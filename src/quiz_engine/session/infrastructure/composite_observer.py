"""CompositeSessionObserver — fans out all events to a list of observers."""

from quiz_engine.session.domain.observer import SessionObserver
from quiz_engine.session.domain.presented import PresentedQuestion


class CompositeSessionObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from SessionObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[SessionObserver]) -> None:
        self._observers = observers

    def question_changed(self, presented: PresentedQuestion) -> None:
        for obs in self._observers:
            obs.question_changed(presented=presented)
