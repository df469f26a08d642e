from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from urllib.parse import urlsplit

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class RangeValidator:
    """Integer value within [min_val, max_val]; either bound may be open."""

    min_val: int | None = None
    max_val: int | None = None

    def validate(self, value: str) -> None:
        if not isinstance(value, str) or _INTEGER_PATTERN.fullmatch(value) is None:
            raise ValueError(f"value {value!r} is not an integer")
        number = int(value)
        if self.min_val is not None and number < self.min_val:
            raise ValueError(f"value must be >= {self.min_val}, got {number}")
        if self.max_val is not None and number > self.max_val:
            raise ValueError(f"value must be <= {self.max_val}, got {number}")


@dataclass(frozen=True, slots=True)
class SetValidator:
    choices: Sequence[str] = field(default_factory=tuple)
    case_insensitive: bool = False

    def validate(self, value: str) -> None:
        if self.case_insensitive:
            allowed = {choice.lower() for choice in self.choices}
            ok = value.lower() in allowed
        else:
            ok = value in self.choices
        if not ok:
            raise ValueError(f"allowed values: {', '.join(self.choices)}")


@dataclass(frozen=True, slots=True)
class PatternValidator:
    pattern: str

    def validate(self, value: str) -> None:
        if re.fullmatch(self.pattern, value) is None:
            raise ValueError(f"value does not match pattern {self.pattern!r}")


@dataclass(frozen=True, slots=True)
class URIValidator:
    """
    Connection URI with an allowed scheme.

    A bare "host" or "host:port" is accepted when `default_scheme` is set.
    """

    allowed_schemes: Sequence[str] = ("tcp",)
    default_scheme: str | None = "tcp"

    def validate(self, value: str) -> None:
        candidate = value
        if "://" not in candidate:
            if self.default_scheme is None:
                raise ValueError("URI scheme is missing")
            candidate = f"{self.default_scheme}://{candidate}"

        try:
            parts = urlsplit(candidate)
            port = parts.port
        except ValueError as exc:
            raise ValueError(f"malformed URI: {exc}") from exc

        if parts.scheme not in self.allowed_schemes:
            raise ValueError(
                f"unsupported scheme {parts.scheme!r}, allowed: {', '.join(self.allowed_schemes)}"
            )
        if parts.scheme != "unix" and not parts.hostname:
            raise ValueError("URI host is missing")
        if port == 0:
            raise ValueError("port must be in range 1-65535")
