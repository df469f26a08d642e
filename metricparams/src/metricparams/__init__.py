"""Schemas and runtime evaluation of monitoring metric parameters."""

from metricparams.api import EvalResult, evaluate_key
from metricparams.errors import (
    ConfigError,
    InvalidParameterError,
    InvalidParamsError,
    MetricError,
    SchemaError,
    TooFewParametersError,
    TooManyParametersError,
)
from metricparams.metric import Metric, ordinalize
from metricparams.params import Param, ParamKind, new_conn_param, new_param
from metricparams.registry import MetricSet

__all__ = [
    "ConfigError",
    "EvalResult",
    "InvalidParameterError",
    "InvalidParamsError",
    "Metric",
    "MetricError",
    "MetricSet",
    "Param",
    "ParamKind",
    "SchemaError",
    "TooFewParametersError",
    "TooManyParametersError",
    "evaluate_key",
    "new_conn_param",
    "new_param",
    "ordinalize",
]
