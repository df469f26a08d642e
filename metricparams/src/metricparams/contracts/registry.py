from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from metricparams.metric import Metric


class MetricNotFoundError(KeyError):
    pass


@runtime_checkable
class MetricRegistry(Protocol):
    def get_metric(self, key: str) -> Metric:
        """Return metric for key or raise MetricNotFoundError."""
        ...

    def list(self) -> Sequence[str]:
        """Flatten into [key, description, ...] for plugin registration."""
        ...
