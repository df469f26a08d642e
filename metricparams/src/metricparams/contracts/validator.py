from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Validator(Protocol):
    """
    Value check attached to a metric parameter.

    Implementations raise `ValueError` with a message explaining the rejection;
    returning normally means the value is accepted.
    """

    def validate(self, value: str) -> None: ...
