"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, questions_path: str) -> None:
        self._log.info("config.loaded", name=name, questions_path=questions_path)

    def config_unseeded_warning(self, name: str) -> None:
        self._log.warning(
            "config.unseeded_warning",
            name=name,
            message="No seed configured; question order will not be reproducible",
        )
