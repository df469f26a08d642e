from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from metricparams.contracts.validator import Validator
from metricparams.errors import SchemaError


class ParamKind(Enum):
    SESSION = "session"
    CONN = "conn"
    GENERAL = "general"


@dataclass(frozen=True, slots=True)
class Param:
    """
    Metadata of one positional metric parameter.

    Built with `new_param` / `new_conn_param` and the chaining methods below;
    each of them returns a new `Param`.
    """

    name: str
    kind: ParamKind = ParamKind.GENERAL
    required: bool = False
    validator: Validator | None = None
    default: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise SchemaError("name cannot be empty")

    @property
    def is_connection(self) -> bool:
        return self.kind is not ParamKind.GENERAL

    def with_session(self) -> Param:
        """
        Make a connection parameter dual purpose: it takes either its own value
        or the name of a configured session.
        """
        if self.kind is not ParamKind.CONN:
            raise SchemaError("only connection typed parameter can be transformed to session")
        return replace(self, kind=ParamKind.SESSION)

    def with_default(self, value: str) -> Param:
        if self.required:
            raise SchemaError("default value cannot be applied to a required parameter")
        return replace(self, default=value)

    def with_validator(self, validator: Validator) -> Param:
        return replace(self, validator=validator)

    def set_required(self) -> Param:
        if self.default is not None:
            raise SchemaError("required parameter cannot have a default value")
        return replace(self, required=True)


def new_param(name: str) -> Param:
    """Create an optional general parameter."""
    return Param(name=name, kind=ParamKind.GENERAL)


def new_conn_param(name: str) -> Param:
    """Create an optional connection parameter."""
    return Param(name=name, kind=ParamKind.CONN)
