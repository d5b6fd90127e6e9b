"""File question loader — reads a JSON or YAML question document into a QuestionBank."""

import json
from pathlib import Path
from typing import Any

import yaml

from quiz_engine.question.domain.bank import QuestionBank
from quiz_engine.question.domain.errors import QuestionValidationError
from quiz_engine.question.domain.observer import QuestionSourceObserver
from quiz_engine.question.infrastructure.errors import QuestionSourceError

_JSON_SUFFIXES = frozenset({".json"})
_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class FileQuestionBankLoader:
    """Loads a ``{"questions": [...]}`` document and returns a validated QuestionBank."""

    def __init__(self, observer: QuestionSourceObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> QuestionBank:
        """
        Read, deserialize, and validate the question document at path.

        Raises:
            QuestionSourceError: if the file is missing or unreadable, has an
                unsupported suffix, is not valid JSON/YAML, or has no
                ``questions`` list.
            QuestionValidationError: if any question violates the bank invariants.
        """
        path_str = str(path)
        self._observer.bank_loading_started(path=path_str)

        try:
            records = _read_records(path=path)
            bank = QuestionBank.load(records)
        except (QuestionSourceError, QuestionValidationError) as exc:
            self._observer.bank_loading_failed(path=path_str, reason=str(exc))
            raise

        self._observer.bank_loading_completed(
            path=path_str,
            total_questions=bank.count(),
        )
        return bank


def _read_records(path: Path) -> list[Any]:
    document = _parse_document(path=path)

    if not isinstance(document, dict):
        raise QuestionSourceError(
            reason=f"expected a mapping at the top level of {path}"
        )

    questions = document.get("questions")
    if not isinstance(questions, list):
        raise QuestionSourceError(reason=f"missing 'questions' list in {path}")

    return questions


def _parse_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in _JSON_SUFFIXES | _YAML_SUFFIXES:
        raise QuestionSourceError(reason=f"unsupported file type: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise QuestionSourceError(reason=f"file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise QuestionSourceError(reason=f"cannot read {path}: {exc}") from exc

    if suffix in _JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise QuestionSourceError(reason=f"invalid JSON in {path}: {exc}") from exc

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise QuestionSourceError(reason=f"invalid YAML in {path}: {exc}") from exc
