from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from metricparams.contracts.session import SessionSource
from metricparams.errors import (
    InvalidParameterError,
    InvalidParamsError,
    SchemaError,
    TooFewParametersError,
    TooManyParametersError,
)
from metricparams.params import Param, ParamKind
from metricparams.sessions import find_session, session_fields

_ORDINAL_SUFFIXES = ("th", "st", "nd", "rd", "th", "th", "th", "th", "th", "th")


def ordinalize(num: int) -> str:
    """Render a 1-based position as 1st, 2nd, 3rd, 4th, ..., 11th, ..., 21st."""
    if 11 <= num % 100 <= 13:
        return f"{num}th"
    return f"{num}{_ORDINAL_SUFFIXES[num % 10]}"


@dataclass(frozen=True, slots=True)
class Metric:
    """
    Description of a metric and its positional parameters.

    Construction enforces the schema rules `eval_params` relies on:
    1. Parameter names are unique.
    2. A session parameter can only be the first one.
    3. Connection parameters are placed in a row, starting at the first position.
    4. Default values pass their own validator.
    """

    description: str
    params: tuple[Param, ...] = ()
    var_param: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))
        _check_schema(self.params)

    def eval_params(
        self,
        raw_params: Sequence[str],
        sessions: SessionSource | None = None,
    ) -> dict[str, str]:
        """
        Map parameter names to the values a metric was called with.

        If the first argument names a configured session, connection values come
        from that session and passing them directly is an error. Raises a
        `MetricError` subclass when too many parameters are passed, a required
        one is missing, or a value is rejected by its validator.
        """
        if not self.var_param and len(raw_params) > len(self.params):
            raise TooManyParametersError()

        session = None
        if raw_params and self.params and self.params[0].kind is ParamKind.SESSION:
            session = find_session(raw_params[0], sessions)

        out: dict[str, str] = {}

        for i, param in enumerate(self.params):
            kind = param.kind
            if kind is ParamKind.SESSION:
                if session is not None:
                    continue
                kind = ParamKind.CONN

            # Connection values are checked against the session in the merge step.
            check = not (session is not None and kind is ParamKind.CONN)
            ord_num = ordinalize(i + 1)

            value: str | None = None
            if i < len(raw_params) and raw_params[i] != "":
                value = raw_params[i]
            else:
                if param.required and check:
                    raise TooFewParametersError.detailed(
                        f"{ord_num} parameter {_quote(param.name)} is required"
                    )
                if param.default is not None and check:
                    value = param.default

            if value is None:
                continue

            if check:
                _validate(param, value, ord_num)

            if kind is ParamKind.GENERAL:
                out[param.name] = value
            elif kind is ParamKind.CONN:
                if session is not None:
                    raise InvalidParamsError.detailed(
                        f"{ord_num} parameter {_quote(param.name)} "
                        "cannot be passed along with session"
                    )
                out[param.name] = value
            else:
                raise SchemaError(f"unexpected parameter kind {kind!r}")

        if session is not None:
            self._merge_with_session(out, session)

        return out

    def _merge_with_session(self, out: dict[str, str], session: Any) -> None:
        positions = {p.name: i for i, p in enumerate(self.params) if p.is_connection}
        values = session_fields(session)

        # Connection params the record does not carry count as empty fields.
        for name, i in positions.items():
            if name not in values and self.params[i].kind is ParamKind.CONN:
                values[name] = ""

        for field_name, value in values.items():
            if field_name not in positions:
                raise SchemaError(f"cannot find parameter {_quote(field_name)} in schema")

            i = positions[field_name]
            param = self.params[i]
            ord_num = ordinalize(i + 1)

            if value == "":
                if param.required:
                    raise TooFewParametersError.detailed(
                        f"{ord_num} parameter {_quote(param.name)} is required"
                    )
                if param.default is not None:
                    value = param.default

            if value != "":
                _validate(param, value, ord_num)

            out[param.name] = value


def _check_schema(params: tuple[Param, ...]) -> None:
    conn_idx = -1
    if params and params[0].is_connection:
        conn_idx = 0

    seen: set[str] = set()
    for i, param in enumerate(params):
        if param.name in seen:
            raise SchemaError(f"name of parameter {_quote(param.name)} must be unique")
        seen.add(param.name)

        if i > 0 and param.kind is ParamKind.SESSION:
            raise SchemaError("session must be placed first")

        if param.kind is ParamKind.CONN:
            if i - conn_idx > 1:
                raise SchemaError("parameters describing a connection must be placed in a row")
            conn_idx = i

        if param.validator is not None and param.default is not None:
            try:
                param.validator.validate(param.default)
            except ValueError as exc:
                raise SchemaError(
                    f"invalid default value {_quote(param.default)} for "
                    f"{ordinalize(i + 1)} parameter {_quote(param.name)}: {exc}"
                ) from exc


def _validate(param: Param, value: str, ord_num: str) -> None:
    if param.validator is None:
        return
    try:
        param.validator.validate(value)
    except ValueError as exc:
        raise InvalidParameterError(
            f"invalid {ord_num} parameter {_quote(param.name)}", cause=exc
        ) from exc


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)
