from __future__ import annotations

from typing import Any, Dict, List
from pydantic import BaseModel, Field

from config import settings


class ForecastRequest(BaseModel):
    data: List[Dict[str, Any]]
    forecast_period: int = Field(default=settings.default_horizon_days, ge=0, le=settings.max_horizon_days)


class PeakAnalysisRequest(BaseModel):
    data: List[Dict[str, Any]]
    threshold: float = Field(default=settings.anomaly_threshold, gt=0.0)
