from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Literal

from metricparams.contracts import MetricNotFoundError, MetricRegistry, SessionSource
from metricparams.errors import MetricError

EvalStatus = Literal["ok", "failed"]

logger = logging.getLogger("metricparams.eval")


@dataclass(frozen=True, slots=True)
class EvalResult:
    """
    Outcome of evaluating one metric call.

    Keep this stable: callers pass `params` straight to data collection.
    """

    key: str
    status: EvalStatus
    params: Mapping[str, str] = field(default_factory=dict)

    # Operator-facing error text when status is "failed"
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def evaluate_key(
    key: str,
    raw_params: Sequence[str],
    *,
    registry: MetricRegistry,
    sessions: SessionSource | None = None,
) -> EvalResult:
    """
    Evaluate the parameters of a metric call.

    User errors (unknown key, bad parameters) come back as a failed result.
    Schema errors are plugin defects and propagate.
    """
    try:
        metric = registry.get_metric(key)
    except MetricNotFoundError:
        logger.warning("Unknown metric key %s", key)
        return EvalResult(key=key, status="failed", message=f"Unsupported item key: {key}")

    try:
        params = metric.eval_params(list(raw_params), sessions)
    except MetricError as exc:
        logger.warning("Cannot evaluate parameters of %s: %s", key, exc)
        return EvalResult(key=key, status="failed", message=str(exc))

    logger.debug("Evaluated %s with %d parameter(s)", key, len(params))
    return EvalResult(key=key, status="ok", params=params)
