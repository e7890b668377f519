"""
Tests for the TimeSeries domain model.
"""
import numpy as np
import pandas as pd
import pytest

from openforecast.core.domain.time_series import TimeScale, TimeSeries
from openforecast.core.errors import IndexOutOfRangeError, InvalidArgumentError


def test_observation_times_follow_period():
    series = TimeSeries(TimeScale.HOUR, "2024-03-01 00:00", 6, [1.0, 2.0, 3.0])

    assert list(series.observation_times) == [
        pd.Timestamp("2024-03-01 00:00"),
        pd.Timestamp("2024-03-01 06:00"),
        pd.Timestamp("2024-03-01 12:00"),
    ]
    assert series.next_start() == pd.Timestamp("2024-03-01 18:00")
    assert series.n == len(series) == 3


def test_monthly_series_anchor_on_start():
    series = TimeSeries(TimeScale.MONTH, "2024-01-31", 1, [1.0, 2.0, 3.0])

    assert list(series.observation_times.strftime("%Y-%m-%d")) == ["2024-01-31", "2024-02-29", "2024-03-31"]


def test_quarter_is_three_months():
    series = TimeSeries(TimeScale.QUARTER, "2023-01-01", 1, [1.0, 2.0])

    assert series.observation_times[1] == pd.Timestamp("2023-04-01")


def test_accepts_string_time_scale():
    series = TimeSeries("week", "2024-01-01", 2, [1.0, 2.0])

    assert series.time_scale is TimeScale.WEEK
    assert series.observation_times[1] == pd.Timestamp("2024-01-15")


def test_at_reads_values():
    series = TimeSeries(TimeScale.DAY, "2024-01-01", 1, [4.0, 5.5])

    assert series.at(0) == 4.0
    assert series.at(1) == 5.5
    with pytest.raises(IndexOutOfRangeError):
        series.at(2)
    with pytest.raises(IndexOutOfRangeError):
        series.at(-1)


def test_values_are_immutable():
    raw = np.array([1.0, 2.0])
    series = TimeSeries(TimeScale.DAY, "2024-01-01", 1, raw)

    raw[0] = 99.0
    assert series.at(0) == 1.0
    with pytest.raises(ValueError):
        series.values[0] = 3.0


@pytest.mark.parametrize("period_length", [0, -2, 1.5, True])
def test_invalid_period_length(period_length):
    with pytest.raises(InvalidArgumentError):
        TimeSeries(TimeScale.DAY, "2024-01-01", period_length, [1.0])


def test_empty_values_rejected():
    with pytest.raises(InvalidArgumentError):
        TimeSeries(TimeScale.DAY, "2024-01-01", 1, [])


def test_from_series_round_trips_index():
    idx = pd.date_range("2024-01-01", periods=4, freq="D")
    series = TimeSeries.from_series(pd.Series([1.0, 2.0, 3.0, 4.0], index=idx), TimeScale.DAY)

    assert series.observation_times.equals(idx)
    np.testing.assert_array_equal(series.values, [1.0, 2.0, 3.0, 4.0])


def test_from_series_rejects_irregular_index():
    idx = pd.DatetimeIndex(["2024-01-01", "2024-01-02", "2024-01-05"])

    with pytest.raises(InvalidArgumentError, match="not spaced"):
        TimeSeries.from_series(pd.Series([1.0, 2.0, 3.0], index=idx), TimeScale.DAY)


def test_to_frame_and_difference():
    series = TimeSeries(TimeScale.MINUTE, "2024-01-01", 1, [1.0, 3.0, 2.0])

    frame = series.to_frame()
    assert list(frame.columns) == ["ds", "y"]
    assert len(frame) == 3
    np.testing.assert_array_equal(series.difference(), [2.0, -1.0])
