from .metrics import METRICS

__all__ = ["METRICS"]
