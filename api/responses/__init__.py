"""
Response models for API endpoints and the forecasting engine's structured results.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import datetime as dt
from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, Field, model_serializer

from engine.enums import AnomalyKind, Priority, RecommendationType, Severity, TrendDirection


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    model_config = {"frozen": True}

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class TimeSeriesPoint(NpModel):

    date: dt.date
    actual: Optional[float] = None
    predicted: float
    seasonal: float
    trend: float
    confidence: float = Field(ge=0.0, le=1.0)
    is_forecast: bool = False

    @property
    def observed_value(self) -> float:
        return self.actual if self.actual is not None else self.predicted


class AnomalyAlert(NpModel):

    date: dt.date
    value: float
    kind: AnomalyKind
    severity: Severity
    message: str


class RegressionStats(NpModel):

    slope: float
    intercept: float
    r_squared: float


class ForecastResult(NpModel):

    series: List[TimeSeriesPoint]
    anomalies: List[AnomalyAlert]
    volatility_percent: float = Field(ge=0.0)
    trend_direction: TrendDirection
    overall_confidence: float = Field(ge=0.0, le=1.0)
    regression: Optional[RegressionStats] = None


class PeakAnalysis(NpModel):

    anomalies: List[AnomalyAlert]
    volatility_percent: float = Field(ge=0.0)
    peak_count: int
    trough_count: int
    high_severity_count: int


class SeasonalAnalysis(NpModel):

    monthly_averages: List[float] = Field(min_length=12, max_length=12)
    overall_average: float
    seasonal_factors: List[float] = Field(min_length=12, max_length=12)
    peak_month: int = Field(ge=0, le=11)
    low_month: int = Field(ge=0, le=11)


class Recommendation(NpModel):

    type: RecommendationType
    title: str
    description: str
    priority: Priority


class SeasonalTrendsReport(ForecastResult):

    seasonal_analysis: SeasonalAnalysis
    recommendations: List[Recommendation]


class HistoryPoint(NpModel):

    date: dt.date
    actual: float


class SeasonalSummary(NpModel):

    peak_month: str
    low_month: str
    overall_average: int
    seasonal_variation: str


class SeasonalAnalysisReport(NpModel):

    seasonal_analysis: SeasonalAnalysis
    historical_data: List[HistoryPoint]
    summary: SeasonalSummary

