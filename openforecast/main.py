import logging
from dataclasses import asdict
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from openforecast.adapters.config.settings_loader import load_settings
from openforecast.adapters.models.random_walk import RandomWalkModel
from openforecast.core.domain.time_series import TimeScale, TimeSeries
from openforecast.core.errors import ForecastError

# Configuration (Load from YAML with Env Overrides)
settings = load_settings()

# Logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# FastAPI Application
app = FastAPI(title="OpenForecast")


class RandomWalkRequest(BaseModel):
    """Observed series and forecast options."""

    values: list[float] = Field(min_length=2)
    start: datetime
    time_scale: TimeScale = TimeScale.DAY
    period_length: int = 1
    steps: int | None = None  # defaults to settings.default_steps
    alpha: float | None = None  # defaults to settings.default_alpha


class ForecastPointOut(BaseModel):
    timestamp: datetime
    value: float
    lower_bound: float
    upper_bound: float


class RandomWalkResponse(BaseModel):
    steps: int
    alpha: float
    residual_std_deviation: float
    critical_value: float
    points: list[ForecastPointOut]


@app.exception_handler(ForecastError)
async def forecast_error_handler(request: Request, exc: ForecastError):
    logger.warning(f"Rejected forecast request: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health")
def health_check():
    return {"status": "ok", "version": "0.1.0"}


@app.post("/forecast/random-walk", response_model=RandomWalkResponse)
def forecast_random_walk(req: RandomWalkRequest):
    """
    Fit a random walk to the posted series and return its forecast with prediction intervals.
    """
    steps = req.steps if req.steps is not None else settings.default_steps
    alpha = req.alpha if req.alpha is not None else settings.default_alpha

    series = TimeSeries(req.time_scale, req.start, req.period_length, req.values)
    model = RandomWalkModel(series)
    forecast = model.forecast(steps, alpha)

    logger.info(f"Forecast {steps} steps at alpha={alpha} from {series.n} observations")

    return RandomWalkResponse(
        steps=forecast.steps,
        alpha=forecast.alpha,
        residual_std_deviation=model.residual_std_deviation,
        critical_value=forecast.critical_value(alpha),
        points=[ForecastPointOut(**asdict(p)) for p in forecast.to_points()],
    )
