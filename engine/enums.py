"""
Enumerations for Trend Direction, Anomaly Kind, Severity, and Recommendation labels

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class TrendDirection(str, Enum):
    increasing = "increasing"
    decreasing = "decreasing"
    stable = "stable"

    @classmethod
    def from_slope(cls, slope: float) -> TrendDirection:
        # cutoff is configurable so tests can tighten or relax it
        from config import settings

        if slope > settings.trend_slope_threshold:
            return cls.increasing
        if slope < -settings.trend_slope_threshold:
            return cls.decreasing
        return cls.stable


class AnomalyKind(str, Enum):
    peak = "peak"
    trough = "trough"


class Severity(str, Enum):
    medium = "medium"
    high = "high"


class RecommendationType(str, Enum):
    opportunity = "opportunity"
    warning = "warning"


class Priority(str, Enum):
    high = "high"
    medium = "medium"
