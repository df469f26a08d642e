from __future__ import annotations


class SchemaError(RuntimeError):
    """
    Defect in a plugin's declared metric schema.

    Raised while building params and metrics, or when a configured session has
    fields the schema does not know. Never caught by the engine: it should abort
    plugin start-up instead of surfacing as a user error.
    """


class MetricError(ValueError):
    """
    Runtime error caused by the parameters a metric was called with.

    The message is meant for the operator and is reported verbatim.
    """

    default_message = "Cannot evaluate metric parameters"

    def __init__(self, message: str | None = None, *, cause: BaseException | None = None) -> None:
        self.message = message if message is not None else self.default_message
        self.cause = cause
        super().__init__(self.message if cause is None else f"{self.message}: {cause}")

    @classmethod
    def detailed(cls, detail: str) -> MetricError:
        return cls(f"{cls.default_message}: {detail}")


class TooManyParametersError(MetricError):
    default_message = "Too many parameters"


class TooFewParametersError(MetricError):
    default_message = "Too few parameters"


class InvalidParamsError(MetricError):
    default_message = "Invalid parameters"


class InvalidParameterError(MetricError):
    """A validator rejected a parameter value."""

    default_message = "Invalid parameter value"


class ConfigError(ValueError):
    pass
