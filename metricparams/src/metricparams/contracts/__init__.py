from .registry import MetricNotFoundError, MetricRegistry
from .session import SessionRecord, SessionSource
from .validator import Validator

__all__ = [
    "MetricNotFoundError",
    "MetricRegistry",
    "SessionRecord",
    "SessionSource",
    "Validator",
]
