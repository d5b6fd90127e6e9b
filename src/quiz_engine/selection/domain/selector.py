"""Stateless random selection of questions and answer orderings."""

from quiz_engine.question.domain.answer import Answer
from quiz_engine.question.domain.bank import QuestionBank
from quiz_engine.question.domain.question import Question
from quiz_engine.selection.domain.errors import EmptyBankError, RandomSourceError
from quiz_engine.selection.domain.random_source import RandomSource


def pick_question(bank: QuestionBank, rng: RandomSource) -> Question:
    """
    Return a uniformly random question from bank.

    Draws are independent and with replacement, so consecutive calls may
    return the same question.

    Raises:
        EmptyBankError: if the bank holds no questions.
        RandomSourceError: if rng returns an index outside the bank.
    """
    total = bank.count()
    if total == 0:
        raise EmptyBankError()
    return bank.all()[_draw(rng=rng, stop=total)]


def shuffle_answers(question: Question, rng: RandomSource) -> tuple[Answer, ...]:
    """
    Return the question's answers in a uniformly random order.

    Draws one answer at a time from the shrinking pool of remaining answers,
    so every permutation is equally likely for a fair rng. The question is
    left untouched; the result holds the same Answer objects.
    """
    remaining = list(question.answers)
    ordered: list[Answer] = []
    while remaining:
        ordered.append(remaining.pop(_draw(rng=rng, stop=len(remaining))))
    return tuple(ordered)


def _draw(rng: RandomSource, stop: int) -> int:
    # Out-of-range draws are errors; a negative index would wrap.
    drawn = rng.randrange(stop)
    if not 0 <= drawn < stop:
        raise RandomSourceError(drawn=drawn, stop=stop)
    return drawn
