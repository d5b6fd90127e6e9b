"""QuizSession — serves random questions from a bank and announces each change."""

from quiz_engine.question.domain.bank import QuestionBank
from quiz_engine.selection.domain.random_source import RandomSource
from quiz_engine.selection.domain.selector import pick_question, shuffle_answers
from quiz_engine.session.domain.observer import SessionObserver
from quiz_engine.session.domain.presented import PresentedQuestion


class QuizSession:
    """Holds the active question for one consumer of a shared QuestionBank.

    The bank is borrowed read-only; the session only tracks which question is
    currently presented.
    """

    def __init__(
        self,
        bank: QuestionBank,
        rng: RandomSource,
        observer: SessionObserver,
    ) -> None:
        self._bank = bank
        self._rng = rng
        self._observer = observer
        self._current: PresentedQuestion | None = None

    @property
    def current(self) -> PresentedQuestion | None:
        return self._current

    def next_question(self) -> PresentedQuestion:
        """
        Pick a random question, shuffle its answers, and notify the observer.

        Raises:
            EmptyBankError: if the bank holds no questions. The observer is not
                notified and the current question is left unchanged.
        """
        question = pick_question(bank=self._bank, rng=self._rng)
        answers = shuffle_answers(question=question, rng=self._rng)
        presented = PresentedQuestion(question=question, answers=answers)
        self._current = presented
        self._observer.question_changed(presented=presented)
        return presented
