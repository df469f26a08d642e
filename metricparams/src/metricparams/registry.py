from __future__ import annotations

from collections.abc import Sequence

from metricparams.contracts import MetricNotFoundError, SessionSource
from metricparams.metric import Metric


class MetricSet(dict[str, Metric]):
    """Mapping of item keys to the metrics a plugin provides."""

    def get_metric(self, key: str) -> Metric:
        try:
            return self[key]
        except KeyError as e:
            raise MetricNotFoundError(key) from e

    def list(self) -> Sequence[str]:
        """
        Return keys and descriptions as [key1, description1, key2, ...].

        Order follows insertion order; sort the keys first if a stable order
        independent of declaration is needed.
        """
        out: list[str] = []
        for key, metric in self.items():
            out.extend((key, metric.description))
        return out

    def eval_params(
        self,
        key: str,
        raw_params: Sequence[str],
        sessions: SessionSource | None = None,
    ) -> dict[str, str]:
        return self.get_metric(key).eval_params(raw_params, sessions)
