"""
TimeSeries Domain Model - Regularly spaced, immutable series of observations.

Observation times are derived from a start timestamp, a time scale and a
period length, so every series built the same way lines up exactly.
"""

from datetime import datetime
from enum import Enum
from typing import Sequence

import numpy as np
import pandas as pd

from openforecast.core.errors import IndexOutOfRangeError, InvalidArgumentError


class TimeScale(str, Enum):
    """Sampling granularity of a series."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    def offset(self, units: int) -> pd.DateOffset:
        """Calendar offset spanning `units` of this scale."""
        if self is TimeScale.QUARTER:
            return pd.DateOffset(months=3 * units)
        return pd.DateOffset(**{f"{self.value}s": units})


class TimeSeries:
    """
    An ordered sequence of real values observed once per period.

    Args:
        time_scale: Granularity of one time unit
        start: Timestamp of the first observation
        period_length: Number of time units between observations
        values: Observed values, one per period
    """

    def __init__(
        self,
        time_scale: TimeScale,
        start: datetime | str | pd.Timestamp,
        period_length: int,
        values: Sequence[float] | np.ndarray,
    ):
        if isinstance(period_length, bool) or not isinstance(period_length, (int, np.integer)):
            raise InvalidArgumentError(f"period_length must be an integer, got {period_length!r}")
        if period_length <= 0:
            raise InvalidArgumentError(f"period_length must be positive, got {period_length}")

        data = np.array(values, dtype=float)
        if data.ndim != 1 or data.size == 0:
            raise InvalidArgumentError("values must be a non-empty one-dimensional sequence")
        data.setflags(write=False)

        self._time_scale = TimeScale(time_scale)
        self._period_length = int(period_length)
        self._values = data

        first = pd.Timestamp(start)
        self._times = pd.DatetimeIndex(
            [first + self._time_scale.offset(self._period_length * i) for i in range(data.size)]
        )

    @classmethod
    def from_series(
        cls,
        series: pd.Series,
        time_scale: TimeScale,
        period_length: int = 1,
    ) -> "TimeSeries":
        """Build from a pandas Series indexed by regularly spaced timestamps."""
        if not isinstance(series.index, pd.DatetimeIndex) or series.empty:
            raise InvalidArgumentError("series must be non-empty and indexed by timestamps")

        result = cls(time_scale, series.index[0], period_length, series.to_numpy(dtype=float))
        if not result.observation_times.equals(series.index):
            raise InvalidArgumentError(
                f"series index is not spaced by {period_length} {TimeScale(time_scale).value}(s)"
            )
        return result

    # --- Read access ---

    @property
    def time_scale(self) -> TimeScale:
        return self._time_scale

    @property
    def period_length(self) -> int:
        return self._period_length

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the observations."""
        return self._values

    @property
    def observation_times(self) -> pd.DatetimeIndex:
        return self._times

    @property
    def start(self) -> pd.Timestamp:
        return self._times[0]

    @property
    def n(self) -> int:
        return self._values.size

    def at(self, index: int) -> float:
        """Value of the observation at `index`."""
        if index < 0 or index >= self.n:
            raise IndexOutOfRangeError(f"index {index} is outside a series of length {self.n}")
        return float(self._values[index])

    def next_start(self) -> pd.Timestamp:
        """Timestamp of the period immediately following the last observation."""
        return self.start + self._time_scale.offset(self._period_length * self.n)

    def difference(self) -> np.ndarray:
        """First differences of the observations."""
        return np.diff(self._values)

    def to_frame(self) -> pd.DataFrame:
        """DataFrame with columns ['ds', 'y']."""
        return pd.DataFrame({"ds": self._times, "y": self._values})

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return (
            f"TimeSeries(time_scale={self._time_scale.value}, start={self.start.isoformat()}, "
            f"period_length={self._period_length}, n={self.n})"
        )
