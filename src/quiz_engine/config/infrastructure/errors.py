"""Error types raised by config infrastructure."""

from pathlib import Path

from quiz_engine.core.errors import QuizEngineError


class MissingEnvVarsError(QuizEngineError):
    """Raised when one or more referenced environment variables are not set."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        var_list = ", ".join(sorted(missing_vars))
        super().__init__(
            f"Failed to load config: missing environment variables: {var_list}"
        )


class ConfigValidationError(QuizEngineError):
    """Raised when the loaded config does not match the RunConfig schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(QuizEngineError):
    """Raised when the config file cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load config: {reason}: {path}")
