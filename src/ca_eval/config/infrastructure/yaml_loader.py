"""YAML config loader — parses, interpolates env vars, validates, emits events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ca_eval.config.domain.config import ConsoleConfig
from ca_eval.config.domain.observer import ConfigObserver
from ca_eval.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from ca_eval.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a ConsoleConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> ConsoleConfig:
        """
        Load, interpolate, validate, and return a ConsoleConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any required ${ENV_VAR} references are unset
                (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        missing = collect_missing_vars(raw)
        if missing:
            raise MissingEnvVarsError(missing_vars=missing)
        cfg = _build_config(resolved=interpolate(raw))
        if cfg.execution.max_concurrent > 1:
            self._observer.config_concurrency_warning(
                max_concurrent=cfg.execution.max_concurrent
            )
        self._observer.config_loaded(name=cfg.name, base_url=cfg.api.base_url)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc
    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    return raw


def _build_config(resolved: Any) -> ConsoleConfig:
    try:
        return ConsoleConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
