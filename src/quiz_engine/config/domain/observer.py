"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, questions_path: str) -> None: ...

    def config_unseeded_warning(self, name: str) -> None: ...
