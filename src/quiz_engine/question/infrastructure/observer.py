"""Structlog implementation of the QuestionSourceObserver port."""

import structlog


class StructlogQuestionSourceObserver:
    """Delegates question source events to structlog.

    Satisfies the QuestionSourceObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def bank_loading_started(self, path: str) -> None:
        self._log.info("question_bank.loading_started", path=path)

    def bank_loading_completed(self, path: str, total_questions: int) -> None:
        self._log.info(
            "question_bank.loading_completed",
            path=path,
            total_questions=total_questions,
        )

    def bank_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("question_bank.loading_failed", path=path, reason=reason)
