"""
Detection logic for local peaks and troughs in a time series. A point is flagged only when it clears both a neighbour-ratio test against the points on either side and a global mean plus or minus one standard deviation band; clearing two standard deviations raises the severity to high.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any, List, Optional, Sequence

import numpy as np

from api.responses import AnomalyAlert, PeakAnalysis, TimeSeriesPoint
from config import settings
from engine.enums import AnomalyKind, Severity
from engine.errors import InvalidInputError
from engine.series import parse_records
from engine.volatility import volatility_percent

MIN_POINTS = 3


def _fmt_value(v: float) -> str:
    text = f"{v:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _pct(v: float, mean: float) -> float:
    if mean == 0:
        return 0.0
    return (v / mean - 1.0) * 100.0


def _resolve_threshold(threshold: Optional[float]) -> float:
    if threshold is None:
        return settings.anomaly_threshold
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise InvalidInputError(f"threshold must be numeric, got {threshold!r}")
    if not math.isfinite(threshold) or threshold <= 0:
        raise InvalidInputError(f"threshold must be a positive finite number, got {threshold!r}")
    return float(threshold)


def _scan(dates: Sequence[date], values: Sequence[float], threshold: float) -> List[AnomalyAlert]:
    if len(values) < MIN_POINTS:
        return []

    arr = np.asarray(values, dtype=float)
    mean = float(arr.mean())
    std = float(arr.std())

    alerts: List[AnomalyAlert] = []
    for i in range(1, len(arr) - 1):
        cur, prev, nxt = float(arr[i]), float(arr[i - 1]), float(arr[i + 1])

        if cur > prev * threshold and cur > nxt * threshold and cur > mean + std:
            alerts.append(AnomalyAlert(
                date=dates[i],
                value=cur,
                kind=AnomalyKind.peak,
                severity=Severity.high if cur > mean + 2 * std else Severity.medium,
                message=(
                    f"Peak detected: {_fmt_value(cur)} "
                    f"({_pct(cur, mean):.1f}% above average)"
                ),
            ))
        elif cur < prev / threshold and cur < nxt / threshold and cur < mean - std:
            alerts.append(AnomalyAlert(
                date=dates[i],
                value=cur,
                kind=AnomalyKind.trough,
                severity=Severity.high if cur < mean - 2 * std else Severity.medium,
                message=(
                    f"Trough detected: {_fmt_value(cur)} "
                    f"({-_pct(cur, mean):.1f}% below average)"
                ),
            ))
    return alerts


def detect(
    points: Sequence[TimeSeriesPoint],
    threshold: float | None = None,
) -> List[AnomalyAlert]:
    threshold = _resolve_threshold(threshold)
    return _scan(
        [p.date for p in points],
        [p.observed_value for p in points],
        threshold,
    )


def analyze_peaks(records: Any, threshold: float | None = None) -> PeakAnalysis:
    threshold = _resolve_threshold(threshold)
    observations = parse_records(records)
    values = [o.value for o in observations]
    alerts = _scan([o.date for o in observations], values, threshold)
    return PeakAnalysis(
        anomalies=alerts,
        volatility_percent=volatility_percent(values),
        peak_count=sum(1 for a in alerts if a.kind == AnomalyKind.peak),
        trough_count=sum(1 for a in alerts if a.kind == AnomalyKind.trough),
        high_severity_count=sum(1 for a in alerts if a.severity == Severity.high),
    )
