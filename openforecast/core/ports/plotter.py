"""
ChartPlotter Port - Interface for rendering charts off the caller's thread.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from pathlib import Path

from openforecast.core.domain.chart import ChartSnapshot


class ChartPlotter(ABC):
    """
    Abstract interface for chart rendering backends.
    """
    
    @abstractmethod
    def submit(self, snapshot: ChartSnapshot) -> "Future[Path]":
        """
        Schedule a chart for rendering and return immediately.
        
        Args:
            snapshot: Immutable chart data
            
        Returns:
            Future resolving to the location of the rendered chart
        """
        ...
    
    @abstractmethod
    def shutdown(self, wait: bool = True) -> None:
        """Release rendering resources."""
        ...
