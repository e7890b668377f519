from typing import Literal
from pydantic import BaseModel, Field

class SystemSettings(BaseModel):
    """
    Global system configuration settings.
    """
    # Forecasting defaults
    default_alpha: float = Field(default=0.05, gt=0.0, lt=1.0, description="Significance level used when a request omits alpha")
    default_steps: int = Field(default=12, gt=0, description="Forecast horizon used when a request omits steps")
    
    # Plotting
    plot_output_dir: str = Field(default="plots", description="Directory that rendered charts are written to")
    plot_dpi: int = Field(default=100, gt=0, description="Resolution of rendered charts")
    plot_workers: int = Field(default=1, gt=0, description="Background threads available for chart rendering")
    
    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO", description="Root logger level")
