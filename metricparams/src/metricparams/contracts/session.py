from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SessionRecord(Protocol):
    """
    Explicit field access for a named session.

    Field names must match connection parameter names of the metrics the
    session is used with.
    """

    def session_fields(self) -> Mapping[str, str]:
        """Return the session's fields in a stable order."""
        ...


# Sessions are looked up by exact key only.
SessionSource = Mapping[str, Any]
