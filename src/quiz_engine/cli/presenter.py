"""ConsoleQuestionPresenter — renders each presented question with Rich."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from quiz_engine.session.domain.presented import PresentedQuestion

_ANSWER_LABELS = "ABCDEFGHIJ"


class ConsoleQuestionPresenter:
    """Session observer that draws the prompt header and answer slots.

    Header title is "Category (Difficulty)" with the question type as
    subtitle. With ``reveal`` each answer is suffixed with its correctness.
    Does NOT inherit from SessionObserver (structural typing via Protocol).
    """

    def __init__(self, console: Console | None = None, reveal: bool = False) -> None:
        self._console = console or Console()
        self._reveal = reveal

    def question_changed(self, presented: PresentedQuestion) -> None:
        question = presented.question
        body = Text(question.text, style="bold")
        body.append("\n")
        for label, answer in zip(_ANSWER_LABELS, presented.answers):
            body.append(f"\n  {label}. ", style="cyan")
            body.append(answer.text)
            if self._reveal:
                style = "green" if answer.is_correct else "dim"
                body.append(f" ({answer.is_correct})", style=style)

        self._console.print(
            Panel(
                body,
                title=f"{question.category} ({question.difficulty})",
                subtitle=str(question.type),
                expand=False,
            )
        )
