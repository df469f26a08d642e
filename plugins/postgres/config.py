from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from metricparams.configuration import PluginConfig


class PostgresSession(BaseModel):
    """Named connection settings; field names match the connection parameters."""

    model_config = ConfigDict(extra="forbid")

    uri: str | None = None
    user: str | None = None
    password: str | None = None
    database: str | None = None


class PostgresConfig(PluginConfig):
    sessions: dict[str, PostgresSession] = Field(default_factory=dict)
