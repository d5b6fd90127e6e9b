"""CLI entrypoint for quiz-engine — typer app with `validate`, `pick` and `run` commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import structlog
import typer

from quiz_engine.cli.cycle import cycle_questions
from quiz_engine.cli.presenter import ConsoleQuestionPresenter
from quiz_engine.config.infrastructure.observer import StructlogConfigObserver
from quiz_engine.config.infrastructure.yaml_loader import YamlConfigLoader
from quiz_engine.core.errors import QuizEngineError
from quiz_engine.question.domain.bank import QuestionBank
from quiz_engine.question.infrastructure.file_loader import FileQuestionBankLoader
from quiz_engine.question.infrastructure.observer import (
    StructlogQuestionSourceObserver,
)
from quiz_engine.selection.infrastructure.random_source import create_random_source
from quiz_engine.session.application.session import QuizSession
from quiz_engine.session.domain.observer import SessionObserver
from quiz_engine.session.infrastructure.composite_observer import (
    CompositeSessionObserver,
)
from quiz_engine.session.infrastructure.observer import StructlogSessionObserver

app = typer.Typer(add_completion=False)

_LOG_FORMAT_OPTION = typer.Option(
    "console",
    "--log-format",
    help="Log format: 'console' or 'json'",
)
_VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Log info-level events as well as warnings and errors",
)


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog based on the requested format and verbosity."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    min_level = logging.INFO if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def _fail(message: str) -> NoReturn:
    typer.echo(message)
    sys.exit(1)


def _load_bank(path: Path) -> QuestionBank:
    loader = FileQuestionBankLoader(observer=StructlogQuestionSourceObserver())
    return loader.load(path=path)


def _session_observer(reveal: bool) -> SessionObserver:
    observers: list[SessionObserver] = [
        StructlogSessionObserver(),
        ConsoleQuestionPresenter(reveal=reveal),
    ]
    return CompositeSessionObserver(observers=observers)


@app.command()
def validate(
    bank_path: Path = typer.Argument(..., help="Path to a JSON or YAML question file"),
    log_format: str = _LOG_FORMAT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Load and validate a question file, then print how many questions it holds."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    try:
        bank = _load_bank(path=bank_path)
    except QuizEngineError as exc:
        _fail(str(exc))
    except Exception as exc:  # noqa: BLE001
        _fail(f"Unexpected error: {exc}\nPlease report this bug.")

    typer.echo(f"{bank_path}: {bank.count()} questions OK")


@app.command()
def pick(
    bank_path: Path = typer.Argument(..., help="Path to a JSON or YAML question file"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Questions to show"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for reproducible picks"),
    reveal: bool = typer.Option(False, "--reveal", help="Show which answer is correct"),
    log_format: str = _LOG_FORMAT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Show random questions from a question file with their answers shuffled."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    try:
        bank = _load_bank(path=bank_path)
        session = QuizSession(
            bank=bank,
            rng=create_random_source(seed=seed),
            observer=_session_observer(reveal=reveal),
        )
        for _ in range(count):
            session.next_question()
    except QuizEngineError as exc:
        _fail(str(exc))
    except Exception as exc:  # noqa: BLE001
        _fail(f"Unexpected error: {exc}\nPlease report this bug.")


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to a run config YAML"),
    reveal: bool = typer.Option(False, "--reveal", help="Show which answer is correct"),
    log_format: str = _LOG_FORMAT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Cycle through random questions on a timer, as described by a run config."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            path=config_path
        )
        bank = _load_bank(path=config.questions_path)
        session = QuizSession(
            bank=bank,
            rng=create_random_source(seed=config.seed),
            observer=_session_observer(reveal=reveal),
        )
        cycle_questions(
            session=session,
            rounds=config.rounds,
            interval_seconds=config.interval_seconds,
        )
    except KeyboardInterrupt:
        _fail("Run interrupted.")
    except QuizEngineError as exc:
        _fail(str(exc))
    except Exception as exc:  # noqa: BLE001
        _fail(f"Unexpected error: {exc}\nPlease report this bug.")


if __name__ == "__main__":
    app()
