"""
Random Walk Model Adapter - Naive forecaster that carries the last observation forward.

The residuals of a random walk are the one-step changes of the series, so
fitting amounts to differencing.
"""

import logging
from numbers import Integral

import numpy as np

from openforecast.core.domain.time_series import TimeSeries
from openforecast.core.errors import InvalidArgumentError
from openforecast.core.ports.model import FittedModel
from openforecast.core.ports.plotter import ChartPlotter
from openforecast.core.services.random_walk_forecast import RandomWalkForecast

logger = logging.getLogger(__name__)


class RandomWalkModel(FittedModel):
    """
    Random walk without drift fitted to a single series.
    """

    def __init__(self, time_series: TimeSeries):
        """
        Fit the model.

        Args:
            time_series: Observed series, at least two observations long
        """
        if time_series is None or time_series.n < 2:
            raise InvalidArgumentError("a random walk needs at least two observations")

        self._time_series = time_series
        self._residuals = time_series.difference()
        self._residuals.setflags(write=False)
        self._sigma = float(np.std(self._residuals, ddof=1)) if self._residuals.size > 1 else 0.0

        logger.info(
            f"Fitted random walk on {time_series.n} observations, residual sigma={self._sigma:.6g}"
        )

    @property
    def time_series(self) -> TimeSeries:
        return self._time_series

    @property
    def residuals(self) -> np.ndarray:
        """One-step changes of the observed series."""
        return self._residuals

    @property
    def residual_std_deviation(self) -> float:
        return self._sigma

    def point_forecast(self, steps: int) -> TimeSeries:
        if isinstance(steps, bool) or not isinstance(steps, Integral) or steps <= 0:
            raise InvalidArgumentError(f"steps must be a positive integer, got {steps!r}")

        last_value = self._time_series.at(self._time_series.n - 1)
        return TimeSeries(
            self._time_series.time_scale,
            self._time_series.next_start(),
            self._time_series.period_length,
            np.full(int(steps), last_value),
        )

    def forecast(
        self,
        steps: int,
        alpha: float = 0.05,
        plotter: ChartPlotter | None = None,
    ) -> RandomWalkForecast:
        """Point forecast and (1 - alpha) prediction intervals for the next `steps` periods."""
        return RandomWalkForecast(self, steps, alpha, plotter=plotter)
