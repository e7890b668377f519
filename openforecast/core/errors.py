"""
Domain errors raised by the forecasting core.
"""


class ForecastError(Exception):
    """Base class for all forecasting errors."""


class InvalidArgumentError(ForecastError, ValueError):
    """Raised when a caller passes a non-positive horizon, an out-of-range alpha or an unusable model."""


class IndexOutOfRangeError(ForecastError, IndexError):
    """Raised when a series is read past its end."""
