"""
Forecast routes: trend projection over caller-supplied series, standalone peak/trough analysis, and seasonal trend reports over synthetic history.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any

from fastapi import APIRouter, Query

from api.requests import ForecastRequest, PeakAnalysisRequest
from api.responses import ForecastResult, PeakAnalysis, SeasonalAnalysisReport, SeasonalTrendsReport
from api.routes.exception import handle_exceptions
from config import settings
from engine.anomaly import analyze_peaks
from engine.forecast import forecast, seasonal_analysis_report, seasonal_trends_with_forecast

router = APIRouter(prefix="/forecasting", tags=["Forecast"])


def _coerce_query_value(value: Any, cast: Any) -> Any:
    # Allow direct unit-test invocation without FastAPI Query parsing.
    raw = value.default if hasattr(value, "default") else value
    return cast(raw)


@router.post("/forecast", summary="Trend forecast with seasonal annotations and anomalies")
@handle_exceptions
async def forecast_series(req: ForecastRequest) -> ForecastResult:
    return forecast(req.data, req.forecast_period)


@router.post("/peak-analysis", summary="Peak and trough detection over a supplied series")
@handle_exceptions
async def peak_analysis(req: PeakAnalysisRequest) -> PeakAnalysis:
    return analyze_peaks(req.data, req.threshold)


@router.get("/seasonal-trends", summary="Seasonal history with forecast and recommendations")
@handle_exceptions
async def seasonal_trends(
    days: int = Query(default=settings.default_history_days, ge=0, le=settings.max_history_days),
    forecast_days: int = Query(default=settings.default_horizon_days, ge=0, le=settings.max_horizon_days),
) -> SeasonalTrendsReport:
    days = _coerce_query_value(days, int)
    forecast_days = _coerce_query_value(forecast_days, int)
    return seasonal_trends_with_forecast(days, forecast_days)


@router.get("/seasonal-analysis", summary="Monthly seasonal pattern summary")
@handle_exceptions
async def seasonal_analysis(
    days: int = Query(default=settings.default_history_days, ge=0, le=settings.max_history_days),
) -> SeasonalAnalysisReport:
    days = _coerce_query_value(days, int)
    return seasonal_analysis_report(days)
