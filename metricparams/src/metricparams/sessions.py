from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Any

from pydantic import BaseModel

from metricparams.contracts.session import SessionRecord, SessionSource
from metricparams.errors import SchemaError


def find_session(name: str, sessions: SessionSource | None) -> Any | None:
    """Return the session stored under exactly `name`, if any."""
    if sessions is None:
        return None
    if not isinstance(sessions, Mapping):
        raise SchemaError(f"sessions must be a mapping of names, got {type(sessions).__name__}")
    if name in sessions:
        return sessions[name]
    return None


def session_fields(session: Any) -> dict[str, str]:
    """
    Read a session's fields by name as strings, keeping declaration order.

    Missing values (None) read as empty strings.
    """
    if isinstance(session, SessionRecord):
        payload: Mapping[str, Any] = session.session_fields()
    elif isinstance(session, Mapping):
        payload = session
    elif isinstance(session, BaseModel):
        payload = session.model_dump(mode="python")
    elif is_dataclass(session) and not isinstance(session, type):
        payload = {f.name: getattr(session, f.name) for f in fields(session)}
    else:
        raise SchemaError(f"unsupported session record type {type(session).__name__}")

    return {str(key): "" if value is None else str(value) for key, value in payload.items()}
