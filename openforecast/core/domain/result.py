"""
Result Domain Models - Data structures for forecast results.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ForecastPoint:
    """A single forecast point with its prediction interval."""
    
    timestamp: datetime
    value: float
    lower_bound: float
    upper_bound: float
