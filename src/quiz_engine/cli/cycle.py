"""Timed question cycling — the refresh loop layered above a QuizSession."""

import time
from collections.abc import Callable

from quiz_engine.session.application.session import QuizSession


def cycle_questions(
    session: QuizSession,
    rounds: int,
    interval_seconds: float,
    sleep: Callable[[float], None] | None = None,
) -> None:
    """
    Present ``rounds`` questions, waiting ``interval_seconds`` between them.

    No wait follows the last round.
    """
    wait = sleep or time.sleep
    for round_index in range(rounds):
        if round_index:
            wait(interval_seconds)
        session.next_question()
