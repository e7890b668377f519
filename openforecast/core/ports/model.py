"""
FittedModel Port - Interface for a model that has already been fit to a series.
"""

from abc import ABC, abstractmethod

from openforecast.core.domain.time_series import TimeSeries


class FittedModel(ABC):
    """
    Abstract interface consumed by forecast strategies.
    
    Parameter estimation happens before an instance is handed to a forecast;
    forecasts only read from it.
    """
    
    @property
    @abstractmethod
    def time_series(self) -> TimeSeries:
        """The series the model was fit on."""
        ...
    
    @property
    @abstractmethod
    def residual_std_deviation(self) -> float:
        """Standard deviation of the in-sample residuals (non-negative)."""
        ...
    
    @abstractmethod
    def point_forecast(self, steps: int) -> TimeSeries:
        """
        Forecast the next `steps` periods.
        
        Args:
            steps: Forecast horizon
            
        Returns:
            TimeSeries of length `steps` starting one period after the last
            observation, with the same time scale and period length
        """
        ...
