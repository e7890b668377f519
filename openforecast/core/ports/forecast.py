"""
Forecast Port - Capability shared by every forecasting strategy.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from pathlib import Path

from openforecast.core.domain.time_series import TimeSeries


class Forecast(ABC):
    """
    Abstract interface for a point forecast with prediction intervals.
    
    Implementations hold their own precomputed series; this class carries no state.
    """
    
    @abstractmethod
    def point_forecast(self) -> TimeSeries:
        """Best-estimate value for each future period."""
        ...
    
    @abstractmethod
    def upper_prediction_interval(self, steps: int, alpha: float) -> TimeSeries:
        """
        Upper bound of the (1 - alpha) prediction interval.
        
        Args:
            steps: Number of periods, at most the length of the point forecast
            alpha: Significance level in (0, 1)
        """
        ...
    
    @abstractmethod
    def lower_prediction_interval(self, steps: int, alpha: float) -> TimeSeries:
        """
        Lower bound of the (1 - alpha) prediction interval.
        
        Args:
            steps: Number of periods, at most the length of the point forecast
            alpha: Significance level in (0, 1)
        """
        ...
    
    @abstractmethod
    def plot(self) -> "Future[Path]":
        """Render the forecast alone without blocking the caller."""
        ...
    
    @abstractmethod
    def past_and_future(self) -> "Future[Path]":
        """Render the observed history followed by the forecast without blocking the caller."""
        ...
