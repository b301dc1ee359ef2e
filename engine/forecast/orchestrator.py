"""
Forecast orchestration: fits a linear trend to the historical series, extends it over a future horizon of daily points, annotates every point with its seasonal component and a confidence score that decays away from the last observation, runs peak/trough detection over the combined series and reports fit quality.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, List, Sequence

from api.responses import ForecastResult, RegressionStats, TimeSeriesPoint
from config import settings
from engine.anomaly import detect
from engine.enums import TrendDirection
from engine.errors import InvalidInputError
from engine.seasonal import seasonal_component
from engine.series import Observation, parse_records
from engine.trend import TrendModel, r_squared
from engine.volatility import volatility_percent

log = logging.getLogger(__name__)


def confidence_at(index: int, n: int) -> float:
    distance = abs(index - (n - 1))
    decayed = 1.0 - (distance / n) * settings.confidence_decay
    return min(1.0, max(settings.confidence_floor, decayed))


def _validate_horizon(horizon_days: Any) -> int:
    if isinstance(horizon_days, bool) or not isinstance(horizon_days, int):
        raise InvalidInputError(f"horizon_days must be an integer, got {horizon_days!r}")
    # a negative horizon projects nothing
    return max(0, horizon_days)


def _degraded(observations: Sequence[Observation]) -> ForecastResult:
    return ForecastResult(
        series=[
            TimeSeriesPoint(
                date=o.date,
                actual=o.value,
                predicted=max(0.0, o.value),
                seasonal=o.value,
                trend=o.value,
                confidence=1.0,
            )
            for o in observations
        ],
        anomalies=[],
        volatility_percent=0.0,
        trend_direction=TrendDirection.stable,
        overall_confidence=0.0,
        regression=None,
    )


def forecast_observations(
    observations: Sequence[Observation],
    horizon_days: int,
) -> ForecastResult:
    horizon_days = _validate_horizon(horizon_days)
    ordered = sorted(observations, key=lambda o: o.date)
    n = len(ordered)
    if n < 2:
        log.debug("forecast: %d point(s), returning neutral result", n)
        return _degraded(ordered)

    values = [o.value for o in ordered]
    model = TrendModel.fit(list(range(n)), values)
    volatility = volatility_percent(values)
    direction = TrendDirection.from_slope(model.slope)

    history: List[TimeSeriesPoint] = []
    for i, obs in enumerate(ordered):
        raw = model.predict(i)
        history.append(TimeSeriesPoint(
            date=obs.date,
            actual=obs.value,
            predicted=max(0.0, raw),
            seasonal=seasonal_component(obs.date, obs.value),
            trend=raw,
            confidence=confidence_at(i, n),
        ))

    last_date = ordered[-1].date
    future: List[TimeSeriesPoint] = []
    for k in range(1, horizon_days + 1):
        future_date = last_date + timedelta(days=k)
        index = n + k - 1
        raw = model.predict(index)
        predicted = max(0.0, raw)
        future.append(TimeSeriesPoint(
            date=future_date,
            actual=None,
            predicted=predicted,
            seasonal=seasonal_component(future_date, predicted),
            trend=raw,
            confidence=confidence_at(index, n),
            is_forecast=True,
        ))

    series = history + future
    anomalies = detect(series)
    fit = r_squared(values, [p.predicted for p in history])

    log.debug(
        "forecast: n=%d horizon=%d slope=%.4f intercept=%.4f r2=%.4f volatility=%.2f%% anomalies=%d",
        n, horizon_days, model.slope, model.intercept, fit, volatility, len(anomalies),
    )

    return ForecastResult(
        series=series,
        anomalies=anomalies,
        volatility_percent=volatility,
        trend_direction=direction,
        overall_confidence=max(0.0, min(1.0, 1.0 - volatility / 100.0)),
        regression=RegressionStats(slope=model.slope, intercept=model.intercept, r_squared=fit),
    )


def forecast(records: Any, horizon_days: int | None = None) -> ForecastResult:
    """Forecast raw ``{date, value}`` records ``horizon_days`` days past the last one.

    Records may arrive in any order and are never mutated. Fewer than two
    records yield a neutral result instead of an error; malformed records
    raise :class:`~engine.errors.InvalidInputError`.
    """
    if horizon_days is None:
        horizon_days = settings.default_horizon_days
    return forecast_observations(parse_records(records), horizon_days)
