"""
Random Walk Forecast Service - Point forecast with widening prediction intervals.

Under a random walk the forecast error at horizon t + 1 has variance
(t + 1) * sigma^2, so the interval half-width grows as critical_value * sqrt(t + 1).
"""

import logging
from concurrent.futures import Future
from numbers import Integral, Real
from pathlib import Path

import numpy as np

from openforecast.core.domain.chart import ChartSnapshot
from openforecast.core.domain.result import ForecastPoint
from openforecast.core.domain.time_series import TimeSeries
from openforecast.core.errors import IndexOutOfRangeError, InvalidArgumentError
from openforecast.core.ports.forecast import Forecast
from openforecast.core.ports.model import FittedModel
from openforecast.core.ports.plotter import ChartPlotter
from openforecast.core.stats.normal import Normal

logger = logging.getLogger(__name__)

_MODEL_ATTRIBUTES = ("time_series", "residual_std_deviation", "point_forecast")


def _validate_steps(steps: int) -> int:
    if isinstance(steps, bool) or not isinstance(steps, Integral):
        raise InvalidArgumentError(f"steps must be an integer, got {steps!r}")
    if steps <= 0:
        raise InvalidArgumentError(f"steps must be positive, got {steps}")
    return int(steps)


def _validate_alpha(alpha: float) -> float:
    if isinstance(alpha, bool) or not isinstance(alpha, Real):
        raise InvalidArgumentError(f"alpha must be a real number, got {alpha!r}")
    if not 0.0 < alpha < 1.0:
        raise InvalidArgumentError(f"alpha must lie strictly between 0 and 1, got {alpha}")
    return float(alpha)


def _validate_model(model: FittedModel) -> FittedModel:
    if model is None:
        raise InvalidArgumentError("model is required")
    if not isinstance(model, FittedModel):
        missing = [name for name in _MODEL_ATTRIBUTES if not hasattr(model, name)]
        if missing:
            raise InvalidArgumentError(f"model does not provide {', '.join(missing)}")
    if not callable(model.point_forecast):
        raise InvalidArgumentError("model.point_forecast is not callable")
    return model


class RandomWalkForecast(Forecast):
    """
    Forecast produced by a fitted random-walk model.

    The point forecast and both interval bounds are computed once, here,
    and never change afterwards.
    """

    def __init__(
        self,
        model: FittedModel,
        steps: int,
        alpha: float,
        plotter: ChartPlotter | None = None,
    ):
        """
        Build the forecast.

        Args:
            model: Fitted model supplying the point forecast and residual deviation
            steps: Forecast horizon
            alpha: Significance level; intervals cover 1 - alpha
            plotter: Backend used by the presentation hooks (default: shared matplotlib plotter)
        """
        self._model = _validate_model(model)
        self._steps = _validate_steps(steps)
        self._alpha = _validate_alpha(alpha)
        self._plotter = plotter

        self._forecast = model.point_forecast(self._steps)
        if not isinstance(self._forecast, TimeSeries):
            raise InvalidArgumentError(
                f"model returned {type(self._forecast).__name__} instead of a TimeSeries"
            )
        if self._forecast.n != self._steps:
            raise InvalidArgumentError(
                f"model returned {self._forecast.n} forecast values, expected {self._steps}"
            )
        self._upper_interval = self.upper_prediction_interval(self._steps, self._alpha)
        self._lower_interval = self.lower_prediction_interval(self._steps, self._alpha)

        logger.debug(
            f"Built random walk forecast steps={self._steps} alpha={self._alpha} "
            f"sigma={model.residual_std_deviation}"
        )

    # --- Read access ---

    @property
    def model(self) -> FittedModel:
        return self._model

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def upper_interval(self) -> TimeSeries:
        return self._upper_interval

    @property
    def lower_interval(self) -> TimeSeries:
        return self._lower_interval

    def point_forecast(self) -> TimeSeries:
        return self._forecast

    # --- Interval computation ---

    def critical_value(self, alpha: float) -> float:
        """Two-sided critical value for confidence level 1 - alpha, in units of the series."""
        alpha = _validate_alpha(alpha)
        return Normal(0.0, self._model.residual_std_deviation).quantile(1.0 - alpha / 2.0)

    def standard_errors(self, steps: int, alpha: float) -> np.ndarray:
        """Half-width of the prediction interval for each of the first `steps` periods."""
        steps = _validate_steps(steps)
        if steps > self._forecast.n:
            raise IndexOutOfRangeError(
                f"requested {steps} steps but the point forecast only covers {self._forecast.n}"
            )
        crit = self.critical_value(alpha)
        return crit * np.sqrt(np.arange(1, steps + 1, dtype=float))

    def upper_prediction_interval(self, steps: int, alpha: float) -> TimeSeries:
        errors = self.standard_errors(steps, alpha)
        return self._bound(self._forecast.values[: errors.size] + errors)

    def lower_prediction_interval(self, steps: int, alpha: float) -> TimeSeries:
        errors = self.standard_errors(steps, alpha)
        return self._bound(self._forecast.values[: errors.size] - errors)

    def _bound(self, values: np.ndarray) -> TimeSeries:
        return TimeSeries(
            self._forecast.time_scale,
            self._forecast.observation_times[0],
            self._forecast.period_length,
            values,
        )

    def to_points(self) -> list[ForecastPoint]:
        """Forecast and interval bounds as one record per period."""
        return [
            ForecastPoint(
                timestamp=ts.to_pydatetime(),
                value=float(value),
                lower_bound=float(lower),
                upper_bound=float(upper),
            )
            for ts, value, lower, upper in zip(
                self._forecast.observation_times,
                self._forecast.values,
                self._lower_interval.values,
                self._upper_interval.values,
            )
        ]

    # --- Presentation ---

    def plot(self) -> "Future[Path]":
        snapshot = ChartSnapshot(
            title="Random Walk Forecast",
            width=800,
            height=600,
            forecast_times=tuple(ts.to_pydatetime() for ts in self._forecast.observation_times),
            forecast_values=tuple(float(v) for v in self._forecast.values),
            errors=tuple(float(e) for e in self.standard_errors(self._forecast.n, self._alpha)),
        )
        return self._get_plotter().submit(snapshot)

    def past_and_future(self) -> "Future[Path]":
        history = self._model.time_series
        snapshot = ChartSnapshot(
            title="Random Walk Past and Future",
            width=1200,
            height=800,
            forecast_times=tuple(ts.to_pydatetime() for ts in self._forecast.observation_times),
            forecast_values=tuple(float(v) for v in self._forecast.values),
            errors=tuple(float(e) for e in self.standard_errors(self._forecast.n, self._alpha)),
            history_times=tuple(ts.to_pydatetime() for ts in history.observation_times),
            history_values=tuple(float(v) for v in history.values),
        )
        return self._get_plotter().submit(snapshot)

    def _get_plotter(self) -> ChartPlotter:
        if self._plotter is not None:
            return self._plotter
        from openforecast.adapters.plotting.matplotlib_plotter import default_plotter
        return default_plotter()

    def __repr__(self) -> str:
        return f"RandomWalkForecast(steps={self._steps}, alpha={self._alpha})"
