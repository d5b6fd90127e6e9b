"""Fake ConfigObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigLoadedEvent:
    name: str
    questions_path: str


@dataclass(frozen=True)
class UnseededWarningEvent:
    name: str


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[ConfigLoadedEvent] = []
        self.unseeded_warnings: list[UnseededWarningEvent] = []

    def config_loaded(self, name: str, questions_path: str) -> None:
        self.loaded.append(ConfigLoadedEvent(name=name, questions_path=questions_path))

    def config_unseeded_warning(self, name: str) -> None:
        self.unseeded_warnings.append(UnseededWarningEvent(name=name))
