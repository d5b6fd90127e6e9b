"""Tests for CompositeSessionObserver and StructlogSessionObserver."""

from structlog.testing import capture_logs

from quiz_engine.session.domain.presented import PresentedQuestion
from quiz_engine.session.infrastructure.composite_observer import (
    CompositeSessionObserver,
)
from quiz_engine.session.infrastructure.observer import StructlogSessionObserver
from tests.question.records import make_question
from tests.session.fake_observer import FakeSessionObserver


def _presented() -> PresentedQuestion:
    question = make_question()
    return PresentedQuestion(question=question, answers=question.answers[::-1])


class TestCompositeSessionObserverFanOut:
    """Every event is forwarded to all observers in order."""

    def test_question_changed_forwarded_to_all(self) -> None:
        obs_a = FakeSessionObserver()
        obs_b = FakeSessionObserver()
        composite = CompositeSessionObserver(observers=[obs_a, obs_b])
        presented = _presented()

        composite.question_changed(presented=presented)

        assert obs_a.changed == [presented]
        assert obs_b.changed == [presented]

    def test_empty_observer_list_is_a_no_op(self) -> None:
        CompositeSessionObserver(observers=[]).question_changed(presented=_presented())


class TestStructlogSessionObserver:
    """StructlogSessionObserver logs one event per question change."""

    def test_logs_question_changed_event(self) -> None:
        with capture_logs() as logs:
            StructlogSessionObserver().question_changed(presented=_presented())

        assert len(logs) == 1
        event = logs[0]
        assert event["event"] == "session.question_changed"
        assert event["log_level"] == "info"
        assert event["category"] == "Grammar"
        assert event["answers"] == ["Rome", "London", "Paris"]
