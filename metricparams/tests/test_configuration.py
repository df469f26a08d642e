from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import BaseModel, ConfigDict, Field

from metricparams.configuration import (
    PluginConfig,
    load_plugin_config,
    load_yaml,
    parse_plugin_config,
    resolve_env_vars,
)
from metricparams.errors import ConfigError


class _ConnSession(BaseModel):
    model_config = ConfigDict(extra="forbid")

    user: str | None = None
    password: str | None = None


class _ConnConfig(PluginConfig):
    sessions: dict[str, _ConnSession] = Field(default_factory=dict)


def _write_yaml(path: Path, payload: Any) -> None:
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")


def test_load_yaml_rejects_non_mapping_root(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    _write_yaml(path, ["a", "b"])

    with pytest.raises(ConfigError, match="YAML root must be a mapping"):
        load_yaml(path)


def test_load_yaml_empty_file_is_empty_mapping(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_yaml(path) == {}


def test_load_plugin_config_resolves_env_and_validates_sessions(
    tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.setenv("DB_PASSWORD", "s3cret")
    path = tmp_path / "plugin.yaml"
    _write_yaml(
        path,
        {"sessions": {"prod": {"user": "zbx", "password": "${DB_PASSWORD}"}, "dev": {}}},
    )

    config = load_plugin_config(path, _ConnConfig)

    assert isinstance(config, _ConnConfig)
    assert config.sessions["prod"] == _ConnSession(user="zbx", password="s3cret")
    assert config.sessions["dev"].user is None


def test_load_plugin_config_reads_nested_section(tmp_path: Path) -> None:
    path = tmp_path / "agent.yaml"
    _write_yaml(path, {"postgres": {"sessions": {"prod": {"user": "a"}}}, "other": 1})

    config = load_plugin_config(path, _ConnConfig, section="postgres")

    assert list(config.sessions) == ["prod"]


def test_load_plugin_config_missing_section_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "agent.yaml"
    _write_yaml(path, {"other": 1})

    config = load_plugin_config(path, section="postgres")

    assert config.sessions == {}


def test_load_plugin_config_logs_session_count(tmp_path: Path, caplog) -> None:
    path = tmp_path / "plugin.yaml"
    _write_yaml(path, {"sessions": {"a": {}, "b": {}}})

    with caplog.at_level(logging.DEBUG, logger="metricparams.config"):
        load_plugin_config(path)

    assert "Loaded 2 session(s)" in caplog.text


def test_missing_env_var_is_reported_with_path() -> None:
    with pytest.raises(ConfigError, match=r"Missing environment variable 'NOPE_X' at \$\.sessions"):
        resolve_env_vars({"sessions": {"prod": {"user": "${NOPE_X}"}}})


def test_unknown_session_field_is_a_config_error() -> None:
    with pytest.raises(ConfigError, match="postgres.sessions.prod.host"):
        parse_plugin_config(
            {"sessions": {"prod": {"host": "db"}}}, _ConnConfig, prefix="postgres"
        )


def test_unknown_top_level_key_is_a_config_error() -> None:
    with pytest.raises(ConfigError, match="config.timeout"):
        parse_plugin_config({"timeout": 3})


def test_null_sessions_are_empty() -> None:
    assert parse_plugin_config({"sessions": None}).sessions == {}


def test_blank_session_name_is_rejected() -> None:
    with pytest.raises(ConfigError, match="session name must be a non-empty string"):
        parse_plugin_config({"sessions": {" ": {}}})


def test_generic_config_keeps_raw_session_values() -> None:
    config = parse_plugin_config({"sessions": {"prod": {"port": 5432}}})

    assert config.sessions == {"prod": {"port": 5432}}
