"""Tests for QuizSession — question changes and their notifications."""

import pytest

from quiz_engine.question.domain.bank import QuestionBank
from quiz_engine.selection.domain.errors import EmptyBankError
from quiz_engine.session.application.session import QuizSession
from tests.question.records import make_question, make_record
from tests.selection.fake_random_source import FakeRandomSource
from tests.session.fake_observer import FakeSessionObserver


def _bank() -> QuestionBank:
    return QuestionBank.load(
        [make_record(text="Question 0"), make_question(text="Question 1")]
    )


class TestNextQuestion:
    """next_question picks, shuffles, stores, and announces a question."""

    def test_picks_then_shuffles_with_the_same_rng(self) -> None:
        rng = FakeRandomSource(indices=[1, 2, 0, 0])
        session = QuizSession(bank=_bank(), rng=rng, observer=FakeSessionObserver())

        presented = session.next_question()

        assert rng.stops == [2, 3, 2, 1]
        assert presented.question.text == "Question 1"
        assert [a.text for a in presented.answers] == ["Rome", "Paris", "London"]

    def test_observer_notified_with_presented_question(self) -> None:
        observer = FakeSessionObserver()
        session = QuizSession(bank=_bank(), rng=FakeRandomSource(), observer=observer)

        presented = session.next_question()

        assert observer.changed == [presented]

    def test_observer_notified_once_per_change(self) -> None:
        observer = FakeSessionObserver()
        session = QuizSession(bank=_bank(), rng=FakeRandomSource(), observer=observer)

        session.next_question()
        session.next_question()
        session.next_question()

        assert len(observer.changed) == 3

    def test_current_is_none_before_first_question(self) -> None:
        session = QuizSession(
            bank=_bank(), rng=FakeRandomSource(), observer=FakeSessionObserver()
        )

        assert session.current is None

    def test_current_tracks_latest_question(self) -> None:
        session = QuizSession(
            bank=_bank(),
            rng=FakeRandomSource(indices=[0, 0, 0, 0, 1]),
            observer=FakeSessionObserver(),
        )

        session.next_question()
        latest = session.next_question()

        assert session.current is latest
        assert latest.question.text == "Question 1"

    def test_presented_answers_are_a_permutation_of_question_answers(self) -> None:
        session = QuizSession(
            bank=_bank(),
            rng=FakeRandomSource(indices=[0, 1, 1, 0]),
            observer=FakeSessionObserver(),
        )

        presented = session.next_question()

        assert sorted(a.text for a in presented.answers) == sorted(
            a.text for a in presented.question.answers
        )

    def test_bank_is_not_mutated(self) -> None:
        bank = _bank()
        before = bank.all()
        session = QuizSession(
            bank=bank, rng=FakeRandomSource(indices=[1, 2, 1]), observer=FakeSessionObserver()
        )

        session.next_question()

        assert bank.all() is before
        assert [a.text for a in bank.all()[1].answers] == ["Paris", "London", "Rome"]


class TestEmptyBank:
    """An empty bank raises EmptyBankError without notifying anyone."""

    def test_empty_bank_raises_and_does_not_notify(self) -> None:
        observer = FakeSessionObserver()
        session = QuizSession(
            bank=QuestionBank.load([]), rng=FakeRandomSource(), observer=observer
        )

        with pytest.raises(EmptyBankError):
            session.next_question()

        assert observer.changed == []
        assert session.current is None
