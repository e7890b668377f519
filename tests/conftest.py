"""
Pytest configuration and shared fixtures for OpenForecast tests.
"""
import numpy as np
import pytest

from openforecast.core.domain.time_series import TimeScale, TimeSeries
from openforecast.core.ports.model import FittedModel


class ConstantModel(FittedModel):
    """Fitted model stub whose point forecast is a constant level."""

    def __init__(self, history: TimeSeries, level: float, sigma: float):
        self._history = history
        self._level = level
        self._sigma = sigma
        self.calls = 0

    @property
    def time_series(self) -> TimeSeries:
        return self._history

    @property
    def residual_std_deviation(self) -> float:
        return self._sigma

    def point_forecast(self, steps: int) -> TimeSeries:
        self.calls += 1
        return TimeSeries(
            self._history.time_scale,
            self._history.next_start(),
            self._history.period_length,
            np.full(steps, self._level),
        )


@pytest.fixture
def history():
    """Ten daily observations starting 2024-01-01."""
    return TimeSeries(TimeScale.DAY, "2024-01-01", 1, [9.0, 9.5, 9.2, 9.8, 10.1, 9.7, 10.4, 10.0, 9.6, 10.0])


@pytest.fixture
def make_model(history):
    def _make(level: float = 10.0, sigma: float = 2.0) -> ConstantModel:
        return ConstantModel(history, level, sigma)
    return _make
