from .config import PostgresConfig, PostgresSession
from .metrics import DEFAULT_URI, METRICS

__all__ = ["DEFAULT_URI", "METRICS", "PostgresConfig", "PostgresSession"]
