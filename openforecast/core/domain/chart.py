"""
Chart Domain Model - Read-only snapshot handed to background renderers.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ChartSnapshot:
    """Everything needed to draw a forecast chart, copied out of the forecast."""
    
    title: str
    width: int
    height: int
    forecast_times: tuple[datetime, ...]
    forecast_values: tuple[float, ...]
    errors: tuple[float, ...]  # half-width of the interval at each step
    history_times: tuple[datetime, ...] = ()
    history_values: tuple[float, ...] = ()
    
    @property
    def has_history(self) -> bool:
        return len(self.history_values) > 0
