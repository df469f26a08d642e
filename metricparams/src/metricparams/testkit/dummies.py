from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


class AcceptAllValidator:
    def __init__(self) -> None:
        self.seen: list[str] = []

    def validate(self, value: str) -> None:
        self.seen.append(value)


@dataclass
class RejectingValidator:
    """Rejects every value in `rejected`; records each value it was asked about."""

    rejected: set[str] = field(default_factory=set)
    message: str = "value is not allowed"
    seen: list[str] = field(default_factory=list)

    def validate(self, value: str) -> None:
        self.seen.append(value)
        if value in self.rejected:
            raise ValueError(self.message)


@dataclass(frozen=True, slots=True)
class DummyConnSession:
    user: str = ""
    password: str = ""


class ExplicitSession:
    """Session record exposing its fields through `session_fields()`."""

    def __init__(self, **values: str) -> None:
        self._values = dict(values)

    def session_fields(self) -> Mapping[str, str]:
        return dict(self._values)
