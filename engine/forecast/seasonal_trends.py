"""
Seasonal trend reporting on top of the forecast: synthesises a seasonal history, forecasts it, summarises its monthly pattern and derives qualitative recommendations from the trend direction, volatility and high-severity anomalies.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import List, Optional

from api.responses import (
    ForecastResult,
    HistoryPoint,
    Recommendation,
    SeasonalAnalysisReport,
    SeasonalSummary,
    SeasonalTrendsReport,
)
from config import settings
from engine.enums import Priority, RecommendationType, Severity, TrendDirection
from engine.forecast.orchestrator import forecast_observations
from engine.seasonal import analyze_seasonal_patterns, generate_history

log = logging.getLogger(__name__)


def build_recommendations(result: ForecastResult) -> List[Recommendation]:
    recs: List[Recommendation] = []

    if result.trend_direction == TrendDirection.increasing:
        recs.append(Recommendation(
            type=RecommendationType.opportunity,
            title="Growth Trend Detected",
            description="Data shows an upward trend. Consider increasing inventory and marketing efforts.",
            priority=Priority.high,
        ))
    elif result.trend_direction == TrendDirection.decreasing:
        recs.append(Recommendation(
            type=RecommendationType.warning,
            title="Declining Trend",
            description="Data shows a downward trend. Consider reviewing strategy and reducing costs.",
            priority=Priority.high,
        ))

    if result.volatility_percent > settings.high_volatility_percent:
        recs.append(Recommendation(
            type=RecommendationType.warning,
            title="High Volatility",
            description="Data shows high volatility. Consider implementing risk management strategies.",
            priority=Priority.medium,
        ))

    high = sum(1 for a in result.anomalies if a.severity == Severity.high)
    if high:
        recs.append(Recommendation(
            type=RecommendationType.opportunity,
            title="Peak Opportunities",
            description=f"{high} high-value peaks detected. Consider capitalizing on these periods.",
            priority=Priority.medium,
        ))

    return recs


def seasonal_trends_with_forecast(
    days: int | None = None,
    horizon_days: int | None = None,
    *,
    seed: Optional[int] = None,
    end: Optional[date] = None,
) -> SeasonalTrendsReport:
    if days is None:
        days = settings.default_history_days
    if horizon_days is None:
        horizon_days = settings.default_horizon_days

    history = generate_history(days, seed=seed, end=end)
    result = forecast_observations(history, horizon_days)
    log.debug("seasonal trends: days=%d horizon=%d direction=%s", days, horizon_days, result.trend_direction.value)

    return SeasonalTrendsReport(
        **dict(result),
        seasonal_analysis=analyze_seasonal_patterns(history),
        recommendations=build_recommendations(result),
    )


def seasonal_analysis_report(
    days: int | None = None,
    *,
    seed: Optional[int] = None,
    end: Optional[date] = None,
) -> SeasonalAnalysisReport:
    if days is None:
        days = settings.default_history_days

    history = generate_history(days, seed=seed, end=end)
    analysis = analyze_seasonal_patterns(history)
    factors = analysis.seasonal_factors
    preview = history[-settings.preview_days:] if settings.preview_days > 0 else []

    return SeasonalAnalysisReport(
        seasonal_analysis=analysis,
        historical_data=[HistoryPoint(date=o.date, actual=o.value) for o in preview],
        summary=SeasonalSummary(
            peak_month=calendar.month_name[analysis.peak_month + 1],
            low_month=calendar.month_name[analysis.low_month + 1],
            overall_average=int(analysis.overall_average + 0.5),
            seasonal_variation=f"{int((max(factors) - min(factors)) * 100 + 0.5)}%",
        ),
    )
