"""Observer port for the question domain — defines events in domain language."""

from typing import Protocol


class QuestionSourceObserver(Protocol):
    def bank_loading_started(self, path: str) -> None: ...

    def bank_loading_completed(self, path: str, total_questions: int) -> None: ...

    def bank_loading_failed(self, path: str, reason: str) -> None: ...
