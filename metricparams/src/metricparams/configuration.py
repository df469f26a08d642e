from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from metricparams.errors import ConfigError

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

logger = logging.getLogger("metricparams.config")


class PluginConfig(BaseModel):
    """
    Plugin configuration block.

    Plugins narrow `sessions` to their own session model so that session
    fields line up with the connection parameters of their metrics.
    """

    model_config = ConfigDict(extra="forbid")

    sessions: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("sessions", mode="before")
    @classmethod
    def _coerce_sessions(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("sessions must be a mapping of session names")
        for name in value:
            if not str(name).strip():
                raise ValueError("session name must be a non-empty string")
        return value


ConfigT = TypeVar("ConfigT", bound=PluginConfig)


def load_yaml(path: str | Path) -> dict[str, Any]:
    with Path(path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ConfigError(f"YAML root must be a mapping: {path}")
    return payload


def load_plugin_config(
    path: str | Path,
    model: type[ConfigT] = PluginConfig,  # type: ignore[assignment]
    *,
    section: str | None = None,
) -> ConfigT:
    """
    Load a plugin configuration file, optionally from a nested `section`.
    """
    payload = resolve_env_vars(load_yaml(path))
    if section is not None:
        payload = payload.get(section) or {}
        if not isinstance(payload, dict):
            raise ConfigError(f"Section '{section}' must be a mapping: {path}")
    config = parse_plugin_config(payload, model, prefix=section or "config")
    logger.debug("Loaded %d session(s) from %s", len(config.sessions), path)
    return config


def parse_plugin_config(
    payload: Mapping[str, Any],
    model: type[ConfigT] = PluginConfig,  # type: ignore[assignment]
    *,
    prefix: str = "config",
) -> ConfigT:
    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(_format_validation_error(prefix, exc)) from exc


def resolve_env_vars(payload: Any) -> Any:
    return _resolve_env_vars(payload, path="$")


def _resolve_env_vars(payload: Any, *, path: str) -> Any:
    if isinstance(payload, Mapping):
        return {
            str(key): _resolve_env_vars(value, path=f"{path}.{key}")
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [
            _resolve_env_vars(value, path=f"{path}[{index}]") for index, value in enumerate(payload)
        ]
    if isinstance(payload, str):
        return _substitute_env(payload, path=path)
    return payload


def _substitute_env(value: str, *, path: str) -> str:
    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        env_value = os.environ.get(key)
        if env_value is None:
            raise ConfigError(f"Missing environment variable '{key}' at {path}")
        return env_value

    return _ENV_VAR_PATTERN.sub(replace, value)


def _format_validation_error(prefix: str, exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in error["loc"])
        details.append(f"{prefix}.{loc}: {error['msg']}")
    return "; ".join(details)
