"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quiz_engine.config.domain.config import RunConfig
from quiz_engine.config.domain.observer import ConfigObserver
from quiz_engine.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from quiz_engine.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a RunConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> RunConfig:
        """
        Load, interpolate, validate, and return a RunConfig from a YAML file.

        A relative ``questions_path`` is resolved against the config file's
        directory.

        Raises:
            ConfigLoadError: if the file does not exist, cannot be read, or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(resolved=interpolate(raw))
        cfg = _resolve_questions_path(cfg=cfg, config_dir=path.parent)
        if cfg.seed is None:
            self._observer.config_unseeded_warning(name=cfg.name)
        self._observer.config_loaded(
            name=cfg.name, questions_path=str(cfg.questions_path)
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(path=path, reason=f"cannot read file ({exc})") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> RunConfig:
    try:
        return RunConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _resolve_questions_path(cfg: RunConfig, config_dir: Path) -> RunConfig:
    if cfg.questions_path.is_absolute():
        return cfg
    return cfg.model_copy(update={"questions_path": config_dir / cfg.questions_path})
