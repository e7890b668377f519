"""
Matplotlib Plotter Adapter - Renders forecast charts on a background worker.

Charts are drawn with matplotlib's object-oriented API (no pyplot state)
in the ggplot style.
"""

import logging
import re
import threading
import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from matplotlib import style
from matplotlib.figure import Figure

from openforecast.adapters.config.settings_loader import load_settings
from openforecast.core.domain.chart import ChartSnapshot
from openforecast.core.ports.plotter import ChartPlotter

logger = logging.getLogger(__name__)


class MatplotlibPlotter(ChartPlotter):
    """
    Chart plotter that writes PNG files from a thread pool.
    """

    def __init__(self, output_dir: str | Path = "plots", dpi: int = 100, max_workers: int = 1):
        """
        Initialize the plotter.

        Args:
            output_dir: Directory charts are written to (created on demand)
            dpi: Resolution; figure size is chart pixels divided by dpi
            max_workers: Number of rendering threads
        """
        self.output_dir = Path(output_dir)
        self.dpi = dpi
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="openforecast-plot")

    def submit(self, snapshot: ChartSnapshot) -> "Future[Path]":
        logger.info(f"Scheduling chart '{snapshot.title}'")
        return self._executor.submit(self.render, snapshot)

    def render(self, snapshot: ChartSnapshot) -> Path:
        """Draw the chart synchronously and return the written file."""
        with style.context("ggplot"):
            fig = Figure(figsize=(snapshot.width / self.dpi, snapshot.height / self.dpi), dpi=self.dpi)
            ax = fig.subplots()

            if snapshot.has_history:
                ax.plot(
                    snapshot.history_times,
                    snapshot.history_values,
                    color="black",
                    linewidth=0.75,
                    label="Past",
                )

            ax.errorbar(
                snapshot.forecast_times,
                snapshot.forecast_values,
                yerr=snapshot.errors,
                color="blue",
                ecolor="red",
                linewidth=1.5,
                label="Future" if snapshot.has_history else "Forecast",
            )

            ax.set_title(snapshot.title)
            ax.legend()
            fig.autofmt_xdate()

            self.output_dir.mkdir(parents=True, exist_ok=True)
            path = self.output_dir / f"{_slugify(snapshot.title)}-{uuid.uuid4().hex[:8]}.png"
            fig.savefig(path)
        logger.info(f"Wrote chart '{snapshot.title}' to {path}")
        return path

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


def _slugify(title: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")


_default: MatplotlibPlotter | None = None
_default_lock = threading.Lock()


def default_plotter() -> MatplotlibPlotter:
    """Process-wide plotter used when a forecast is not given one, configured from system settings."""
    global _default
    with _default_lock:
        if _default is None:
            settings = load_settings()
            _default = MatplotlibPlotter(
                output_dir=settings.plot_output_dir,
                dpi=settings.plot_dpi,
                max_workers=settings.plot_workers,
            )
        return _default
